"""
Entité film et règles de validation de ses champs.

Un Film est toujours valide : chaque champ est contrôlé à la construction
et par chaque setter, une valeur invalide lève immédiatement une
FilmValidationError identifiant le champ fautif.

L'identité d'un film est le triplet (titre, réalisateur, année) comparé
sans tenir compte de la casse. Genre, note et statut de visionnage ne
participent pas à l'identité.
"""

import re
from enum import Enum
from typing import Optional

from cinetheque.core.errors import (
    EmptyFieldError,
    InvalidYearFormatError,
    MissingViewStatusError,
    RatingOutOfRangeError,
    UnknownViewStatusError,
)

YEAR_PATTERN = re.compile(r"[0-9]{4}")

MIN_RATING = 0
MAX_RATING = 5

# Libelle d'une note a 0, plus l'ancien libelle des fichiers historiques
UNRATED_LABEL = "unrated"
UNRATED_ALIASES = frozenset({UNRATED_LABEL, "da valutare"})


class ViewStatus(Enum):
    """Statut de visionnage d'un film.

    Valeurs:
        TO_WATCH: A voir
        WATCHING: En cours de visionnage
        WATCHED: Vu
    """

    TO_WATCH = "To watch"
    WATCHING = "Watching"
    WATCHED = "Watched"

    @property
    def label(self) -> str:
        """Libellé lisible du statut."""
        return self.value

    @classmethod
    def from_label(cls, label: Optional[str]) -> "ViewStatus":
        """
        Convertit un libellé (insensible à la casse) en statut.

        Raises:
            UnknownViewStatusError: Si le libellé ne correspond à aucun statut
        """
        if label is not None:
            wanted = label.strip().casefold()
            for status in cls:
                if status.label.casefold() == wanted:
                    return status
        raise UnknownViewStatusError(label)

    @classmethod
    def parse(cls, text: Optional[str]) -> "ViewStatus":
        """Accepte le nom interne (TO_WATCH) ou le libellé (To watch), sans casse."""
        if text is not None:
            wanted = text.strip().casefold()
            for status in cls:
                if status.name.casefold() == wanted:
                    return status
        return cls.from_label(text)


# ====================
# Validateurs de champs
# ====================


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise EmptyFieldError(field)
    return value


def validate_title(title: Optional[str]) -> str:
    return _require_text(title, "title")


def validate_director(director: Optional[str]) -> str:
    return _require_text(director, "director")


def validate_genre(genre: Optional[str]) -> str:
    return _require_text(genre, "genre")


def validate_release_year(release_year: Optional[str]) -> str:
    """L'année est une chaîne de exactement 4 chiffres."""
    _require_text(release_year, "release_year")
    if not YEAR_PATTERN.fullmatch(release_year):
        raise InvalidYearFormatError(release_year)
    return release_year


def validate_rating(rating: int) -> int:
    """Note entière de 0 (non notée) à 5."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise RatingOutOfRangeError(rating)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise RatingOutOfRangeError(rating)
    return rating


def validate_view_status(view_status: Optional[ViewStatus]) -> ViewStatus:
    if view_status is None:
        raise MissingViewStatusError()
    if not isinstance(view_status, ViewStatus):
        raise UnknownViewStatusError(view_status)
    return view_status


def parse_rating(text: Optional[str]) -> int:
    """
    Convertit la représentation texte d'une note en entier.

    Accepte "unrated" (sans casse, ou l'ancien libellé "Da valutare"),
    "0", ou un entier de 0 à 5.

    Raises:
        RatingOutOfRangeError: Pour toute autre valeur
    """
    if text is None:
        raise RatingOutOfRangeError(text)
    value = text.strip()
    if value.casefold() in UNRATED_ALIASES:
        return 0
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise RatingOutOfRangeError(text)
    return validate_rating(int(value))


class Film:
    """
    Un film du catalogue.

    Attributs :
        title : Titre (non vide)
        director : Réalisateur (non vide)
        release_year : Année de sortie, chaîne "AAAA"
        genre : Genre (non vide)
        rating : Note de 0 à 5, 0 signifiant "non noté"
        view_status : Statut de visionnage
    """

    __slots__ = ("_title", "_director", "_release_year", "_genre", "_rating", "_view_status")

    def __init__(
        self,
        title: str,
        director: str,
        release_year: str,
        genre: str,
        rating: int = 0,
        view_status: ViewStatus = ViewStatus.TO_WATCH,
    ) -> None:
        self.title = title
        self.director = director
        self.release_year = release_year
        self.genre = genre
        self.rating = rating
        self.view_status = view_status

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = validate_title(value)

    @property
    def director(self) -> str:
        return self._director

    @director.setter
    def director(self, value: str) -> None:
        self._director = validate_director(value)

    @property
    def release_year(self) -> str:
        return self._release_year

    @release_year.setter
    def release_year(self, value: str) -> None:
        self._release_year = validate_release_year(value)

    @property
    def genre(self) -> str:
        return self._genre

    @genre.setter
    def genre(self, value: str) -> None:
        self._genre = validate_genre(value)

    @property
    def rating(self) -> int:
        return self._rating

    @rating.setter
    def rating(self, value: int) -> None:
        self._rating = validate_rating(value)

    @property
    def view_status(self) -> ViewStatus:
        return self._view_status

    @view_status.setter
    def view_status(self, value: ViewStatus) -> None:
        self._view_status = validate_view_status(value)

    @property
    def identity(self) -> tuple[str, str, str]:
        """Clé d'identité (titre, réalisateur, année) sans casse."""
        return (
            self._title.casefold(),
            self._director.casefold(),
            self._release_year.casefold(),
        )

    def rating_display(self) -> str:
        """Retourne "unrated" pour 0, sinon le chiffre de la note."""
        return UNRATED_LABEL if self._rating == 0 else str(self._rating)

    def view_status_display(self) -> str:
        return self._view_status.label

    def same_details(self, other: "Film") -> bool:
        """Vrai si genre, note et statut sont identiques (genre sans casse)."""
        return (
            self._genre.casefold() == other.genre.casefold()
            and self._rating == other.rating
            and self._view_status is other.view_status
        )

    def copy(self) -> "Film":
        return Film(
            self._title,
            self._director,
            self._release_year,
            self._genre,
            self._rating,
            self._view_status,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Film):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __repr__(self) -> str:
        return (
            f"Film(title={self._title!r}, director={self._director!r}, "
            f"release_year={self._release_year!r}, genre={self._genre!r}, "
            f"rating={self._rating}, view_status={self._view_status.name})"
        )
