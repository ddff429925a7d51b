"""
Repository en mémoire du catalogue.

Possède la liste de films faisant autorité. La liste interne n'est modifiée
que par les méthodes du repository : list() et les recherches retournent
toujours des copies. La persistance est déléguée aux sérialiseurs ; un
chargement ne remplace la collection que s'il réussit entièrement.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from cinetheque.adapters.serializers import default_serializers
from cinetheque.core.entities.film import Film
from cinetheque.core.errors import (
    IdentityConflictError,
    NoChangeError,
    UnsupportedFormatError,
)
from cinetheque.core.ports.repositories import IFilmRepository
from cinetheque.core.ports.serializer import IFilmSerializer
from cinetheque.core.value_objects import FileFormat
from cinetheque.services.sorting import SortKey, sort_films


class InMemoryFilmRepository(IFilmRepository):
    """
    Collection ordonnée de films uniques par identité.

    Args:
        serializers: Sérialiseur à utiliser pour chaque format de fichier
            (CSV et JSON par défaut)
        films: Contenu initial optionnel (les doublons sont ignorés)
    """

    def __init__(
        self,
        serializers: Optional[Mapping[FileFormat, IFilmSerializer]] = None,
        films: Optional[Sequence[Film]] = None,
    ) -> None:
        self._serializers: dict[FileFormat, IFilmSerializer] = dict(
            default_serializers() if serializers is None else serializers
        )
        self._films: list[Film] = []
        for film in films or ():
            self.add(film)

    def __len__(self) -> int:
        return len(self._films)

    def __contains__(self, film: object) -> bool:
        return film in self._films

    # ====================
    # CRUD
    # ====================

    def add(self, film: Optional[Film]) -> bool:
        if film is None or film in self._films:
            return False
        self._films.append(film)
        logger.debug(f"Film ajoute : {film.title} ({film.release_year})")
        return True

    def edit(self, old_film: Film, new_film: Film) -> bool:
        # Le conflit d'identite est verifie avant l'existence de old_film
        if new_film in self._films:
            present = self._films[self._films.index(new_film)]
            if present != old_film:
                raise IdentityConflictError(new_film.title)
            if new_film.same_details(old_film):
                raise NoChangeError(old_film.title)

        try:
            index = self._films.index(old_film)
        except ValueError:
            return False
        self._films[index] = new_film
        logger.debug(f"Film modifie : {old_film.title} -> {new_film.title}")
        return True

    def remove(self, film: Film) -> bool:
        try:
            self._films.remove(film)
        except ValueError:
            return False
        logger.debug(f"Film supprime : {film.title} ({film.release_year})")
        return True

    def clear(self) -> None:
        self._films.clear()
        logger.debug("Catalogue vide")

    # ====================
    # Lecture
    # ====================

    def list(self) -> list[Film]:
        return list(self._films)

    def _find(self, text: Optional[str], attribute: Callable[[Film], str]) -> list[Film]:
        if text is None or not text.strip():
            return self.list()
        wanted = text.casefold()
        return [film for film in self._films if wanted in attribute(film).casefold()]

    def find_by_title(self, text: Optional[str]) -> list[Film]:
        return self._find(text, lambda film: film.title)

    def find_by_director(self, text: Optional[str]) -> list[Film]:
        return self._find(text, lambda film: film.director)

    def sort(
        self,
        films: Sequence[Film],
        key: Optional[Union[SortKey, str]],
    ) -> list[Film]:
        return sort_films(films, key)

    def unique_genres(self) -> list[str]:
        return sorted({film.genre for film in self._films})

    def unique_directors(self) -> list[str]:
        return sorted({film.director for film in self._films})

    def unique_years(self) -> list[str]:
        return sorted({film.release_year for film in self._films})

    # ====================
    # Persistance
    # ====================

    def _serializer_for(self, fmt: Union[FileFormat, str]) -> IFilmSerializer:
        try:
            file_format = FileFormat.parse(fmt)
        except ValueError as e:
            raise UnsupportedFormatError(fmt) from e
        serializer = self._serializers.get(file_format)
        if serializer is None:
            raise UnsupportedFormatError(fmt)
        return serializer

    def save_as(self, path: Union[str, Path], fmt: Union[FileFormat, str]) -> None:
        self._serializer_for(fmt).save(self.list(), path)

    def load_from(self, path: Union[str, Path], fmt: Union[FileFormat, str]) -> None:
        films = self._serializer_for(fmt).load(path)
        # Remplacement atomique : seulement apres un chargement complet
        self._films = list(films)
        logger.info(f"Catalogue remplace : {len(self._films)} films", path=str(path))
