"""
Commandes CLI de gestion du catalogue (list, add, edit, remove, import, export, stats).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from cinetheque.adapters.cli.display import render_films_table, render_stats_table
from cinetheque.adapters.cli.helpers import (
    console,
    find_film,
    open_catalog,
    save_catalog,
    suppress_loguru,
    with_container,
)
from cinetheque.core.entities.film import ViewStatus
from cinetheque.core.errors import CatalogError
from cinetheque.core.value_objects import FileFormat, FilterCriteria, SearchField
from cinetheque.services.sorting import SortKey

CatalogOption = Annotated[
    Optional[Path],
    typer.Option("--catalog", "-c", help="Fichier du catalogue (.json ou .csv)"),
]


def _parse_status(value: Optional[str]) -> Optional[ViewStatus]:
    if value is None:
        return None
    try:
        return ViewStatus.parse(value)
    except ValueError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _parse_sort_key(value: Optional[str]) -> Optional[SortKey]:
    if value is None:
        return None
    try:
        return SortKey.parse(value)
    except ValueError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1)


# ============================================================================
# list
# ============================================================================


def list_films(
    catalog: CatalogOption = None,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Texte recherche (sans casse, partiel)"),
    ] = None,
    field: Annotated[
        SearchField,
        typer.Option("--field", help="Champ de recherche"),
    ] = SearchField.TITLE,
    genre: Annotated[Optional[str], typer.Option("--genre", help="Genre exact")] = None,
    director: Annotated[
        Optional[str], typer.Option("--director", help="Realisateur (partiel)")
    ] = None,
    year: Annotated[Optional[str], typer.Option("--year", help="Annee de sortie")] = None,
    status: Annotated[
        Optional[str], typer.Option("--status", help="Statut (TO_WATCH, Watched...)")
    ] = None,
    rating: Annotated[
        Optional[int], typer.Option("--rating", min=0, max=5, help="Note exacte (0 = non note)")
    ] = None,
    sort: Annotated[
        Optional[str], typer.Option("--sort", help="Cle de tri (title-asc, rating-desc...)")
    ] = None,
) -> None:
    """Affiche les films : recherche, puis filtres, puis tri."""
    _list_films(catalog, search, field, genre, director, year, status, rating, sort)


@with_container()
def _list_films(container, catalog, search, field, genre, director, year, status, rating, sort) -> None:
    criteria = FilterCriteria(
        genre=genre,
        director=director,
        release_year=year,
        view_status=_parse_status(status),
        rating=rating,
    )
    sort_key = _parse_sort_key(sort)
    opened = open_catalog(container, catalog)

    films = opened.service.query(search, field, criteria, sort_key)
    if not films:
        console.print("[yellow]Aucun film trouve.[/yellow]")
        return
    with suppress_loguru():
        console.print(render_films_table(films, title=f"Catalogue ({len(films)} films)"))


# ============================================================================
# add / edit / remove
# ============================================================================


def add(
    title: Annotated[str, typer.Argument(help="Titre du film")],
    director: Annotated[str, typer.Argument(help="Realisateur")],
    year: Annotated[str, typer.Argument(help="Annee de sortie (AAAA)")],
    genre: Annotated[str, typer.Argument(help="Genre")],
    catalog: CatalogOption = None,
    rating: Annotated[int, typer.Option("--rating", "-r", help="Note de 0 a 5")] = 0,
    status: Annotated[
        str, typer.Option("--status", help="Statut de visionnage")
    ] = ViewStatus.TO_WATCH.name,
) -> None:
    """Ajoute un film au catalogue."""
    _add(catalog, title, director, year, genre, rating, status)


@with_container()
def _add(container, catalog, title, director, year, genre, rating, status) -> None:
    view_status = _parse_status(status)
    opened = open_catalog(container, catalog)

    try:
        added = opened.service.add_film(title, director, year, genre, rating, view_status)
    except CatalogError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not added:
        console.print(f"[yellow]Film deja present:[/yellow] {title} ({director}, {year})")
        raise typer.Exit(1)

    save_catalog(opened)
    console.print(f"[green]Film ajoute:[/green] {title} ({director}, {year})")


def edit(
    title: Annotated[str, typer.Argument(help="Titre du film a modifier")],
    director: Annotated[str, typer.Argument(help="Realisateur du film a modifier")],
    year: Annotated[str, typer.Argument(help="Annee du film a modifier")],
    catalog: CatalogOption = None,
    new_title: Annotated[Optional[str], typer.Option("--new-title", help="Nouveau titre")] = None,
    new_director: Annotated[
        Optional[str], typer.Option("--new-director", help="Nouveau realisateur")
    ] = None,
    new_year: Annotated[Optional[str], typer.Option("--new-year", help="Nouvelle annee")] = None,
    genre: Annotated[Optional[str], typer.Option("--genre", help="Nouveau genre")] = None,
    rating: Annotated[Optional[int], typer.Option("--rating", "-r", help="Nouvelle note")] = None,
    status: Annotated[Optional[str], typer.Option("--status", help="Nouveau statut")] = None,
) -> None:
    """Modifie un film identifie par son titre, son realisateur et son annee."""
    _edit(catalog, title, director, year, new_title, new_director, new_year, genre, rating, status)


@with_container()
def _edit(
    container, catalog, title, director, year,
    new_title, new_director, new_year, genre, rating, status,
) -> None:
    view_status = _parse_status(status)
    opened = open_catalog(container, catalog)

    original = find_film(opened.service, title, director, year)
    if original is None:
        console.print(f"[red]Film introuvable:[/red] {title} ({director}, {year})")
        raise typer.Exit(1)

    try:
        edited = opened.service.edit_film(
            original,
            new_title if new_title is not None else original.title,
            new_director if new_director is not None else original.director,
            new_year if new_year is not None else original.release_year,
            genre if genre is not None else original.genre,
            rating if rating is not None else original.rating,
            view_status if view_status is not None else original.view_status,
        )
    except CatalogError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not edited:
        console.print(f"[red]Film introuvable:[/red] {title} ({director}, {year})")
        raise typer.Exit(1)

    save_catalog(opened)
    console.print(f"[green]Film modifie:[/green] {opened.service.describe_undo()}")


def remove(
    title: Annotated[str, typer.Argument(help="Titre du film")],
    director: Annotated[str, typer.Argument(help="Realisateur")],
    year: Annotated[str, typer.Argument(help="Annee de sortie")],
    catalog: CatalogOption = None,
) -> None:
    """Supprime un film du catalogue."""
    _remove(catalog, title, director, year)


@with_container()
def _remove(container, catalog, title, director, year) -> None:
    opened = open_catalog(container, catalog)

    film = find_film(opened.service, title, director, year)
    if film is None or not opened.service.remove_film(film):
        console.print(f"[red]Film introuvable:[/red] {title} ({director}, {year})")
        raise typer.Exit(1)

    save_catalog(opened)
    console.print(f"[green]Film supprime:[/green] {film.title} ({film.director}, {film.release_year})")


# ============================================================================
# import / export / stats
# ============================================================================


def import_catalog(
    source: Annotated[Path, typer.Argument(help="Fichier a importer (.json ou .csv)")],
    catalog: CatalogOption = None,
    file_format: Annotated[
        Optional[FileFormat],
        typer.Option("--format", "-f", help="Format du fichier source"),
    ] = None,
) -> None:
    """Valide un fichier et remplace le catalogue par son contenu (tout ou rien)."""
    _import_catalog(catalog, source, file_format)


@with_container()
def _import_catalog(container, catalog, source: Path, file_format: Optional[FileFormat]) -> None:
    opened = open_catalog(container, catalog)
    source_format = file_format or FileFormat.from_path(source, opened.file_format)

    status = opened.service.load(source, source_format)
    if not status.success:
        console.print(f"[red]{escape(status.message)}[/red]")
        raise typer.Exit(1)

    save_catalog(opened)
    console.print(
        f"[green]{len(opened.service.films())} films importes[/green] depuis {source}"
    )


def export_catalog(
    destination: Annotated[Path, typer.Argument(help="Fichier de destination")],
    catalog: CatalogOption = None,
    file_format: Annotated[
        Optional[FileFormat],
        typer.Option("--format", "-f", help="Format du fichier de destination"),
    ] = None,
) -> None:
    """Ecrit le catalogue dans un autre fichier (conversion CSV <-> JSON)."""
    _export_catalog(catalog, destination, file_format)


@with_container()
def _export_catalog(
    container, catalog, destination: Path, file_format: Optional[FileFormat]
) -> None:
    opened = open_catalog(container, catalog)
    target_format = file_format or FileFormat.from_path(destination, opened.file_format)

    status = opened.service.save(destination, target_format)
    if not status.success:
        console.print(f"[red]{escape(status.message)}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]{escape(status.message)}[/green]")


def stats(catalog: CatalogOption = None) -> None:
    """Affiche un resume du catalogue."""
    _stats(catalog)


@with_container()
def _stats(container, catalog) -> None:
    opened = open_catalog(container, catalog)
    service = opened.service

    with suppress_loguru():
        console.print(render_stats_table(service.films()))
    console.print(f"\n[bold]Genres:[/bold] {', '.join(service.unique_genres()) or '-'}")
    console.print(f"[bold]Realisateurs:[/bold] {', '.join(service.unique_directors()) or '-'}")
    console.print(f"[bold]Annees:[/bold] {', '.join(service.unique_years()) or '-'}")
