"""
Affichage Rich du catalogue.

Responsabilites:
- Tableau des films (titre, realisateur, annee, genre, note, statut)
- Resume statistique du catalogue
"""

from typing import Sequence

from rich.markup import escape
from rich.table import Table

from cinetheque.core.entities.film import Film, ViewStatus


def render_films_table(films: Sequence[Film], title: str = "Catalogue") -> Table:
    """Construit le tableau des films, dans l'ordre donne."""
    table = Table(title=title, show_header=True)
    table.add_column("Title", style="cyan")
    table.add_column("Director")
    table.add_column("Year", justify="right")
    table.add_column("Genre")
    table.add_column("Rating", justify="right")
    table.add_column("Status")

    for film in films:
        table.add_row(
            escape(film.title),
            escape(film.director),
            film.release_year,
            escape(film.genre),
            film.rating_display(),
            film.view_status_display(),
        )
    return table


def render_stats_table(films: Sequence[Film]) -> Table:
    """Construit le resume par statut de visionnage."""
    table = Table(title="Resume par statut")
    table.add_column("Status", style="cyan")
    table.add_column("Films", justify="right")

    for status in ViewStatus:
        count = sum(1 for film in films if film.view_status is status)
        table.add_row(status.label, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{len(films)}[/bold]")
    return table
