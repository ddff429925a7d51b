"""
Commandes réversibles du catalogue.

Chaque commande capture les données nécessaires à son exécution et à son
inverse exact. Une commande est immuable après construction, à l'exception
du film produit lors de l'exécution (ajout, modification), conservé pour
que l'annulation porte sur la même instance.

L'ensemble est fermé : ajout, modification et suppression.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinetheque.core.entities.film import Film, ViewStatus
from cinetheque.core.ports.repositories import IFilmRepository


class Command(ABC):
    """Action réversible sur le repository."""

    def __init__(self, repository: IFilmRepository) -> None:
        self._repository = repository

    @abstractmethod
    def execute(self) -> bool:
        """Exécute l'action. Retourne True si le repository a été modifié."""
        ...

    @abstractmethod
    def undo(self) -> None:
        """Annule l'action."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Libellé lisible de l'action (menus annuler/rétablir)."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


class AddFilmCommand(Command):
    """
    Ajout d'un film construit depuis ses champs bruts.

    Les erreurs de validation à la construction du film sont propagées
    à l'appelant.
    """

    def __init__(
        self,
        repository: IFilmRepository,
        title: str,
        director: str,
        release_year: str,
        genre: str,
        rating: int = 0,
        view_status: ViewStatus = ViewStatus.TO_WATCH,
    ) -> None:
        super().__init__(repository)
        self._title = title
        self._director = director
        self._release_year = release_year
        self._genre = genre
        self._rating = rating
        self._view_status = view_status
        self._added: Optional[Film] = None

    @property
    def added_film(self) -> Optional[Film]:
        return self._added

    def execute(self) -> bool:
        self._added = Film(
            self._title,
            self._director,
            self._release_year,
            self._genre,
            self._rating,
            self._view_status,
        )
        return self._repository.add(self._added)

    def undo(self) -> None:
        if self._added is not None:
            self._repository.remove(self._added)

    @property
    def description(self) -> str:
        return f"Add film: {self._title} ({self._director})"


class RemoveFilmCommand(Command):
    """Suppression d'un film ; l'annulation le réinsère."""

    def __init__(self, repository: IFilmRepository, film: Film) -> None:
        super().__init__(repository)
        self._film = film

    def execute(self) -> bool:
        return self._repository.remove(self._film)

    def undo(self) -> None:
        self._repository.add(self._film)

    @property
    def description(self) -> str:
        return f"Remove film: {self._film.title} ({self._film.director})"


class EditFilmCommand(Command):
    """
    Remplacement d'un film par une version construite depuis de nouveaux champs.

    L'annulation effectue la modification inverse et obéit donc aux mêmes
    règles (conflit d'identité, absence de changement).
    """

    def __init__(
        self,
        repository: IFilmRepository,
        original: Film,
        title: str,
        director: str,
        release_year: str,
        genre: str,
        rating: int,
        view_status: ViewStatus,
    ) -> None:
        super().__init__(repository)
        self._original = original
        self._title = title
        self._director = director
        self._release_year = release_year
        self._genre = genre
        self._rating = rating
        self._view_status = view_status
        self._replacement: Optional[Film] = None

    @property
    def replacement(self) -> Optional[Film]:
        return self._replacement

    def execute(self) -> bool:
        self._replacement = Film(
            self._title,
            self._director,
            self._release_year,
            self._genre,
            self._rating,
            self._view_status,
        )
        return self._repository.edit(self._original, self._replacement)

    def undo(self) -> None:
        if self._replacement is not None:
            self._repository.edit(self._replacement, self._original)

    @property
    def description(self) -> str:
        return f"Edit film: {self._original.title} -> {self._title}"
