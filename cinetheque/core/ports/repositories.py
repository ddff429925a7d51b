"""
Interface port pour le repository du catalogue.

Le repository possède la collection de films faisant autorité. Les appelants
ne reçoivent jamais de référence mutable vers la collection interne.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence, Union

from cinetheque.core.entities.film import Film
from cinetheque.core.value_objects import FileFormat


class IFilmRepository(ABC):
    """
    Interface de stockage des films.

    Définit les opérations CRUD, de recherche et de persistance.
    L'unicité porte sur l'identité (titre, réalisateur, année) sans casse.
    """

    @abstractmethod
    def add(self, film: Optional[Film]) -> bool:
        """Ajoute un film. Retourne False si None ou déjà présent."""
        ...

    @abstractmethod
    def edit(self, old_film: Film, new_film: Film) -> bool:
        """
        Remplace old_film par new_film à la même position.

        Raises :
            IdentityConflictError : new_film a l'identité d'un autre film
            NoChangeError : ni genre, ni note, ni statut ne changent

        Retourne :
            False si old_film est absent, True sinon
        """
        ...

    @abstractmethod
    def remove(self, film: Film) -> bool:
        """Supprime le film de même identité. Retourne False si absent."""
        ...

    @abstractmethod
    def list(self) -> list[Film]:
        """Copie indépendante de la collection."""
        ...

    @abstractmethod
    def find_by_title(self, text: Optional[str]) -> list[Film]:
        """Recherche par sous-chaîne du titre, sans casse."""
        ...

    @abstractmethod
    def find_by_director(self, text: Optional[str]) -> list[Film]:
        """Recherche par sous-chaîne du réalisateur, sans casse."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Vide la collection (irréversible)."""
        ...

    @abstractmethod
    def save_as(self, path: Union[str, Path], fmt: Union[FileFormat, str]) -> None:
        """Écrit la collection dans le format demandé."""
        ...

    @abstractmethod
    def load_from(self, path: Union[str, Path], fmt: Union[FileFormat, str]) -> None:
        """Remplace la collection par le contenu du fichier (tout-ou-rien)."""
        ...

    @abstractmethod
    def unique_genres(self) -> list[str]:
        ...

    @abstractmethod
    def unique_directors(self) -> list[str]:
        ...

    @abstractmethod
    def unique_years(self) -> list[str]:
        ...

    @abstractmethod
    def sort(self, films: Sequence[Film], key) -> list[Film]:
        """Trie une séquence de films selon la clé de tri (None = ordre inchangé)."""
        ...
