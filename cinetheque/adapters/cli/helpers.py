"""
Utilitaires partages pour les commandes CLI de Cinetheque.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- open_catalog / save_catalog : chargement et sauvegarde du catalogue configure
- find_film : recherche d'un film par identite (titre, realisateur, annee)
"""

from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from pathlib import Path
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from cinetheque.container import Container
from cinetheque.core.entities.film import Film
from cinetheque.core.value_objects import FileFormat
from cinetheque.services.videotheque import VideothequeService

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinetheque")
    try:
        yield
    finally:
        loguru_logger.enable("cinetheque")


def with_container():
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container()
        def my_command(container, ...):
            service = container.videotheque_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(Container(), *args, **kwargs)
        return wrapper
    return decorator


@dataclass
class OpenCatalog:
    """Catalogue charge pour une commande."""

    service: VideothequeService
    path: Path
    file_format: FileFormat


def open_catalog(container: Container, catalog: Optional[Path]) -> OpenCatalog:
    """
    Charge le catalogue (celui de la configuration par defaut).

    Un fichier inexistant donne un catalogue vide ; un fichier invalide
    arrete la commande avec le code 1.
    """
    settings = container.config()
    path = (catalog or settings.catalog_file).expanduser()
    file_format = FileFormat.from_path(path, settings.default_format)
    service = container.videotheque_service()

    if path.exists():
        status = service.load(path, file_format)
        if not status.success:
            console.print(f"[red]{escape(status.message)}[/red]")
            raise typer.Exit(1)
    else:
        loguru_logger.info(f"Catalogue inexistant, demarrage a vide : {path}")

    return OpenCatalog(service=service, path=path, file_format=file_format)


def save_catalog(opened: OpenCatalog) -> None:
    """Sauvegarde le catalogue ; arrete la commande avec le code 1 en cas d'echec."""
    opened.path.parent.mkdir(parents=True, exist_ok=True)
    status = opened.service.save(opened.path, opened.file_format)
    if not status.success:
        console.print(f"[red]{escape(status.message)}[/red]")
        raise typer.Exit(1)


def find_film(
    service: VideothequeService,
    title: str,
    director: str,
    release_year: str,
) -> Optional[Film]:
    """Retourne le film de meme identite (sans casse), ou None."""
    wanted = (title.casefold(), director.casefold(), release_year.casefold())
    return next((film for film in service.films() if film.identity == wanted), None)
