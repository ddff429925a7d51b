"""
Façade du catalogue pour les interfaces (CLI, interface graphique).

Compose le repository et l'historique :
- les modifications passent par des commandes exécutées via l'historique
- les requêtes suivent le pipeline recherche -> filtres -> tri
- la sauvegarde et le chargement retournent un Status sans jamais lever
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from cinetheque.core.entities.film import Film, ViewStatus
from cinetheque.core.ports.repositories import IFilmRepository
from cinetheque.core.value_objects import FileFormat, FilterCriteria, SearchField, Status
from cinetheque.services.history import (
    AddFilmCommand,
    EditFilmCommand,
    HistoryManager,
    RemoveFilmCommand,
)
from cinetheque.services.sorting import SortKey


class VideothequeService:
    """
    Point d'entrée unique des interfaces vers le moteur du catalogue.

    Args:
        repository: Collection de films (une instance partagée par application)
        history: Historique annuler/rétablir associé à ce repository
    """

    def __init__(self, repository: IFilmRepository, history: HistoryManager) -> None:
        self._repository = repository
        self._history = history

    @property
    def repository(self) -> IFilmRepository:
        return self._repository

    # ====================
    # Modifications (annulables)
    # ====================

    def add_film(
        self,
        title: str,
        director: str,
        release_year: str,
        genre: str,
        rating: int = 0,
        view_status: ViewStatus = ViewStatus.TO_WATCH,
    ) -> bool:
        """
        Ajoute un film via l'historique.

        Raises:
            FilmValidationError: Si un champ est invalide

        Returns:
            False si un film de même identité existe déjà
        """
        command = AddFilmCommand(
            self._repository, title, director, release_year, genre, rating, view_status
        )
        return self._history.run(command)

    def edit_film(
        self,
        original: Film,
        title: str,
        director: str,
        release_year: str,
        genre: str,
        rating: int,
        view_status: ViewStatus,
    ) -> bool:
        """
        Modifie un film via l'historique.

        Raises:
            FilmValidationError: Si un nouveau champ est invalide
            IdentityConflictError: Si la nouvelle identité appartient à un autre film
            NoChangeError: Si ni genre, ni note, ni statut ne changent
        """
        command = EditFilmCommand(
            self._repository,
            original,
            title,
            director,
            release_year,
            genre,
            rating,
            view_status,
        )
        return self._history.run(command)

    def remove_film(self, film: Film) -> bool:
        return self._history.run(RemoveFilmCommand(self._repository, film))

    def clear_catalog(self) -> None:
        """Vide le catalogue ; l'opération n'est pas annulable et vide l'historique."""
        self._repository.clear()
        self._history.clear()

    # ====================
    # Historique
    # ====================

    def undo(self) -> bool:
        return self._history.undo()

    def redo(self) -> bool:
        return self._history.redo()

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def describe_undo(self) -> Optional[str]:
        return self._history.describe_undo()

    def describe_redo(self) -> Optional[str]:
        return self._history.describe_redo()

    # ====================
    # Requetes
    # ====================

    def films(self) -> list[Film]:
        return self._repository.list()

    def search(
        self,
        text: Optional[str],
        field: Union[SearchField, str] = SearchField.TITLE,
    ) -> list[Film]:
        """Recherche textuelle sans casse ; un texte vide retourne tout le catalogue."""
        if SearchField.parse(field) is SearchField.DIRECTOR:
            return self._repository.find_by_director(text)
        return self._repository.find_by_title(text)

    @staticmethod
    def apply_filters(
        films: Sequence[Film],
        criteria: Optional[FilterCriteria] = None,
    ) -> list[Film]:
        if criteria is None or criteria.is_empty:
            return list(films)
        return [film for film in films if criteria.matches(film)]

    def sort(
        self,
        films: Sequence[Film],
        key: Optional[Union[SortKey, str]] = None,
    ) -> list[Film]:
        return self._repository.sort(films, key)

    def query(
        self,
        text: Optional[str] = None,
        field: Union[SearchField, str] = SearchField.TITLE,
        criteria: Optional[FilterCriteria] = None,
        sort_key: Optional[Union[SortKey, str]] = None,
    ) -> list[Film]:
        """Pipeline complet : recherche, puis filtres, puis tri."""
        films = self.search(text, field)
        films = self.apply_filters(films, criteria)
        return self.sort(films, sort_key)

    def unique_genres(self) -> list[str]:
        return self._repository.unique_genres()

    def unique_directors(self) -> list[str]:
        return self._repository.unique_directors()

    def unique_years(self) -> list[str]:
        return self._repository.unique_years()

    # ====================
    # Persistance
    # ====================

    def save(self, path: Union[str, Path], fmt: Union[FileFormat, str]) -> Status:
        try:
            self._repository.save_as(path, fmt)
        except OSError as e:
            logger.warning(f"Echec de la sauvegarde de {path} : {e}")
            return Status(False, f"Error while saving the catalog: {e}")
        file_format = FileFormat.parse(fmt)
        return Status(True, f"Catalog saved as {file_format.name} to: {path}")

    def load(self, path: Union[str, Path], fmt: Union[FileFormat, str]) -> Status:
        """
        Remplace le catalogue par le contenu du fichier.

        En cas d'échec le catalogue et l'historique sont inchangés ; en cas
        de succès l'historique est vidé.
        """
        try:
            self._repository.load_from(path, fmt)
        except OSError as e:
            logger.warning(f"Echec du chargement de {path} : {e}")
            return Status(False, f"Error while loading the catalog: {e}")
        self._history.clear()
        return Status(True, f"Catalog loaded from: {path}")
