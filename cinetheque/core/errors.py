"""
Taxonomie des erreurs du catalogue.

- FilmValidationError : champ invalide à la construction ou à la modification d'un film
- EditRejectedError : modification refusée (conflit d'identité ou aucun changement)
- DuplicateEntryError / MalformedRecordError : rejets par enregistrement au chargement
- CatalogIOError : erreurs fichier (extension, fichier absent, chargement agrégé)

Le type de l'exception (et son attribut discriminant) porte la variante,
jamais un préfixe dans le message.
"""

from enum import Enum
from typing import Optional


class ValidationErrorKind(str, Enum):
    """Nature d'une erreur de validation de champ."""

    EMPTY_FIELD = "empty_field"
    INVALID_YEAR_FORMAT = "invalid_year_format"
    RATING_OUT_OF_RANGE = "rating_out_of_range"
    MISSING_VIEW_STATUS = "missing_view_status"
    UNKNOWN_VIEW_STATUS = "unknown_view_status"


class EditRejection(str, Enum):
    """Motif de refus d'une modification."""

    IDENTITY_CONFLICT = "identity_conflict"
    NO_CHANGE = "no_change"


class CatalogError(Exception):
    """Erreur métier de base du catalogue."""


# ====================
# Validation de champ
# ====================


class FilmValidationError(CatalogError, ValueError):
    """
    Un champ du film est invalide.

    Attributs :
        field : Nom du champ fautif (ex: "release_year")
        kind : Nature de l'erreur
    """

    kind: ValidationErrorKind

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class EmptyFieldError(FilmValidationError):
    kind = ValidationErrorKind.EMPTY_FIELD

    def __init__(self, field: str) -> None:
        super().__init__(field, f"The field '{field}' cannot be empty.")


class InvalidYearFormatError(FilmValidationError):
    kind = ValidationErrorKind.INVALID_YEAR_FORMAT

    def __init__(self, value: object) -> None:
        super().__init__(
            "release_year",
            f"The release year must use the YYYY format, got: {value!r}.",
        )


class RatingOutOfRangeError(FilmValidationError):
    kind = ValidationErrorKind.RATING_OUT_OF_RANGE

    def __init__(self, value: object) -> None:
        super().__init__(
            "rating",
            f"The rating must be an integer between 0 and 5 or 'unrated', got: {value!r}.",
        )


class MissingViewStatusError(FilmValidationError):
    kind = ValidationErrorKind.MISSING_VIEW_STATUS

    def __init__(self) -> None:
        super().__init__("view_status", "The view status cannot be empty.")


class UnknownViewStatusError(FilmValidationError):
    kind = ValidationErrorKind.UNKNOWN_VIEW_STATUS

    def __init__(self, value: object) -> None:
        super().__init__("view_status", f"Unknown view status: {value!r}.")


# ====================
# Regles metier du repository
# ====================


class EditRejectedError(CatalogError):
    """Modification refusée par une règle métier (distincte d'un simple échec)."""

    reason: EditRejection


class IdentityConflictError(EditRejectedError):
    """Le nouveau film a l'identité d'un autre film déjà présent."""

    reason = EditRejection.IDENTITY_CONFLICT

    def __init__(self, title: str) -> None:
        super().__init__(
            f"Cannot turn this film into '{title}': another film with the same "
            "title, director and year already exists."
        )
        self.title = title


class NoChangeError(EditRejectedError):
    """La modification ne change ni le genre, ni la note, ni le statut."""

    reason = EditRejection.NO_CHANGE

    def __init__(self, title: str) -> None:
        super().__init__(f"No changes were made to the film '{title}'.")
        self.title = title


class DuplicateEntryError(CatalogError):
    """Un film de même identité est déjà présent."""

    def __init__(self, title: str) -> None:
        super().__init__("entry already present")
        self.title = title


class MalformedRecordError(CatalogError):
    """Enregistrement structurellement invalide (nombre de champs, accolades)."""


# ====================
# Erreurs fichier
# ====================


class CatalogIOError(OSError):
    """Erreur d'entrée/sortie du catalogue (lecture, écriture, format)."""


class InvalidExtensionError(CatalogIOError):
    def __init__(self, path: object, extension: str) -> None:
        super().__init__(
            f"Invalid file format: {path}\n"
            f"The file must have the single extension .{extension} "
            "without multiple extensions."
        )
        self.path = path
        self.extension = extension


class CatalogFileNotFoundError(CatalogIOError):
    def __init__(self, path: object) -> None:
        super().__init__(f"File not found:\n{path}")
        self.path = path


class UnsupportedFormatError(CatalogIOError):
    def __init__(self, fmt: object) -> None:
        super().__init__(f"Unsupported format: {fmt}")
        self.format = fmt


class AggregatedLoadError(CatalogIOError):
    """
    Un ou plusieurs enregistrements invalides : le chargement entier est refusé.

    Attributs :
        errors : Une ligne lisible par enregistrement fautif
    """

    HEADER = "Unable to load file. Invalid entries found:\n"

    def __init__(self, errors: list[str], path: Optional[object] = None) -> None:
        super().__init__(self.HEADER + "".join(f"{line}\n" for line in errors))
        self.errors = list(errors)
        self.path = path
