"""
Point d'entrée CLI de Cinetheque.

Configure le logging selon les options de verbosité et monte les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    add,
    edit,
    export_catalog,
    import_catalog,
    list_films,
    remove,
    stats,
)
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="cinetheque",
    help="Gestion d'un catalogue personnel de films",
)

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}

_VERBOSE_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


def _console_level() -> Optional[str]:
    if state["quiet"]:
        return "ERROR"
    return _VERBOSE_LEVELS.get(min(state["verbose"], 2))


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Cinetheque - Catalogue personnel de films."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    settings = Settings()
    configure_logging(settings, _console_level())
    logger.debug("Demarrage de Cinetheque", version=__version__)


# Monter les commandes depuis commands.py
# Note: "list" et "import" masquent des noms Python, donc on utilise name= explicitement
app.command(name="list")(list_films)
app.command()(add)
app.command()(edit)
app.command()(remove)
app.command(name="import")(import_catalog)
app.command(name="export")(export_catalog)
app.command()(stats)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"Catalogue : {config.catalog_file}")
    typer.echo(f"Format : {config.catalog_format.name}")
    typer.echo(f"Encodage : {config.file_encoding}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Cinetheque v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
