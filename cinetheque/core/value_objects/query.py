"""
Objets valeur pour l'interrogation et la persistance du catalogue.

- FileFormat : formats de fichier supportés
- SearchField : champ ciblé par la recherche textuelle
- FilterCriteria : filtres combinables (None = pas de filtre sur ce champ)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from cinetheque.core.entities.film import Film, ViewStatus


class FileFormat(str, Enum):
    """Format de fichier du catalogue."""

    CSV = "csv"
    JSON = "json"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["FileFormat", str]) -> "FileFormat":
        """
        Convertit un nom de format (sans casse) en FileFormat.

        Raises:
            ValueError: Si le format n'est pas supporté
        """
        if isinstance(value, FileFormat):
            return value
        wanted = str(value).strip().lstrip(".").casefold()
        for fmt in cls:
            if fmt.value == wanted:
                return fmt
        raise ValueError(f"Unsupported format: {value}")

    @classmethod
    def from_path(cls, path: Union[str, Path], fallback: "FileFormat") -> "FileFormat":
        """Format déduit de l'extension du fichier, fallback si elle n'est pas reconnue."""
        try:
            return cls.parse(Path(path).suffix)
        except ValueError:
            return fallback


class SearchField(str, Enum):
    """Champ sur lequel porte la recherche textuelle."""

    TITLE = "title"
    DIRECTOR = "director"

    @classmethod
    def parse(cls, value: Union["SearchField", str]) -> "SearchField":
        if isinstance(value, SearchField):
            return value
        wanted = str(value).strip().casefold()
        # "creator" est l'ancien nom du champ realisateur
        if wanted == "creator":
            return cls.DIRECTOR
        return cls(wanted)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Critères de filtrage cumulatifs.

    Attributs:
        genre: Genre exact (sans casse)
        director: Sous-chaîne du réalisateur (sans casse)
        release_year: Année exacte
        view_status: Statut de visionnage exact
        rating: Note exacte (0 = non noté)
    """

    genre: Optional[str] = None
    director: Optional[str] = None
    release_year: Optional[str] = None
    view_status: Optional["ViewStatus"] = None
    rating: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.genre is None
            and self.director is None
            and self.release_year is None
            and self.view_status is None
            and self.rating is None
        )

    def matches(self, film: "Film") -> bool:
        """Vrai si le film satisfait tous les critères renseignés."""
        if self.genre is not None and film.genre.casefold() != self.genre.casefold():
            return False
        if self.director is not None and self.director.casefold() not in film.director.casefold():
            return False
        if self.release_year is not None and film.release_year != self.release_year:
            return False
        if self.view_status is not None and film.view_status is not self.view_status:
            return False
        if self.rating is not None and film.rating != self.rating:
            return False
        return True
