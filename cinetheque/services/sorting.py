"""
Stratégies de tri du catalogue.

Chaque stratégie est une fonction pure et sans état qui retourne une nouvelle
liste triée. Le tri Python est stable : les films de clé égale conservent
leur ordre relatif, y compris en ordre décroissant (reverse=True).

Les comparaisons de texte ignorent la casse. L'année étant une chaîne de
4 chiffres, l'ordre lexicographique équivaut à l'ordre numérique.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Optional, Union

from cinetheque.core.entities.film import Film

SortStrategy = Callable[[Sequence[Film]], list[Film]]


class SortKey(str, Enum):
    """Clé de tri sélectionnable par nom."""

    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"
    DIRECTOR_ASC = "director-asc"
    DIRECTOR_DESC = "director-desc"
    RATING_ASC = "rating-asc"
    RATING_DESC = "rating-desc"
    YEAR_ASC = "year-asc"
    YEAR_DESC = "year-desc"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union["SortKey", str]) -> "SortKey":
        """
        Accepte la valeur ("title-asc"), le nom ("TITLE_ASC") ou l'alias
        "creator-*" du réalisateur.

        Raises:
            ValueError: Si la clé est inconnue
        """
        if isinstance(value, SortKey):
            return value
        wanted = str(value).strip().casefold().replace("_", "-")
        wanted = wanted.replace("creator", "director")
        for key in cls:
            if key.value == wanted:
                return key
        raise ValueError(f"Unknown sort key: {value}")


_LABELS = {
    SortKey.TITLE_ASC: "Title (A-Z)",
    SortKey.TITLE_DESC: "Title (Z-A)",
    SortKey.DIRECTOR_ASC: "Director (A-Z)",
    SortKey.DIRECTOR_DESC: "Director (Z-A)",
    SortKey.RATING_ASC: "Rating (1-5)",
    SortKey.RATING_DESC: "Rating (5-1)",
    SortKey.YEAR_ASC: "Release year (ASC)",
    SortKey.YEAR_DESC: "Release year (DESC)",
}


def _by(key_fn: Callable[[Film], Any], descending: bool) -> SortStrategy:
    def strategy(films: Sequence[Film]) -> list[Film]:
        return sorted(films, key=key_fn, reverse=descending)

    return strategy


def _title(film: Film) -> str:
    return film.title.casefold()


def _director(film: Film) -> str:
    return film.director.casefold()


def _rating(film: Film) -> int:
    return film.rating


def _year(film: Film) -> str:
    return film.release_year


STRATEGIES: dict[SortKey, SortStrategy] = {
    SortKey.TITLE_ASC: _by(_title, descending=False),
    SortKey.TITLE_DESC: _by(_title, descending=True),
    SortKey.DIRECTOR_ASC: _by(_director, descending=False),
    SortKey.DIRECTOR_DESC: _by(_director, descending=True),
    SortKey.RATING_ASC: _by(_rating, descending=False),
    SortKey.RATING_DESC: _by(_rating, descending=True),
    SortKey.YEAR_ASC: _by(_year, descending=False),
    SortKey.YEAR_DESC: _by(_year, descending=True),
}


def get_strategy(key: Union[SortKey, str]) -> SortStrategy:
    """Retourne la stratégie associée à une clé (nom ou SortKey)."""
    return STRATEGIES[SortKey.parse(key)]


def sort_films(
    films: Sequence[Film],
    key: Optional[Union[SortKey, str]] = None,
) -> list[Film]:
    """
    Trie les films selon la clé donnée.

    Args:
        films: Films à trier (non modifiés)
        key: Clé de tri, ou None pour conserver l'ordre

    Returns:
        Nouvelle liste, copie simple si key est None
    """
    if key is None:
        return list(films)
    return get_strategy(key)(films)
