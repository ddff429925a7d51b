"""
Tests pour la taxonomie des erreurs du catalogue.
"""

from pathlib import Path

from cinetheque.core.errors import (
    AggregatedLoadError,
    CatalogError,
    CatalogFileNotFoundError,
    CatalogIOError,
    DuplicateEntryError,
    EditRejectedError,
    EditRejection,
    IdentityConflictError,
    InvalidExtensionError,
    NoChangeError,
)


class TestEditRejections:
    """Les refus de modification portent leur motif."""

    def test_identity_conflict(self) -> None:
        error = IdentityConflictError("Il Padrino")
        assert isinstance(error, EditRejectedError)
        assert error.reason is EditRejection.IDENTITY_CONFLICT
        assert error.title == "Il Padrino"

    def test_no_change(self) -> None:
        error = NoChangeError("Il Padrino")
        assert error.reason is EditRejection.NO_CHANGE
        assert "Il Padrino" in str(error)


class TestCatalogIOErrors:
    """Les erreurs fichier sont des OSError."""

    def test_io_errors_are_os_errors(self) -> None:
        assert issubclass(CatalogIOError, OSError)
        assert not issubclass(CatalogIOError, CatalogError)

    def test_file_not_found_message(self) -> None:
        error = CatalogFileNotFoundError(Path("/tmp/absent.csv"))
        assert str(error) == "File not found:\n/tmp/absent.csv"

    def test_invalid_extension_names_expected_extension(self) -> None:
        error = InvalidExtensionError("x.tar.csv", "csv")
        assert "x.tar.csv" in str(error)
        assert ".csv" in str(error)

    def test_aggregated_message_lists_each_error(self) -> None:
        """Le message agrégé contient une ligne par enregistrement fautif."""
        error = AggregatedLoadError(["row 2: bad", "row 3 (Alien): entry already present"])
        assert str(error) == (
            "Unable to load file. Invalid entries found:\n"
            "row 2: bad\n"
            "row 3 (Alien): entry already present\n"
        )
        assert error.errors == ["row 2: bad", "row 3 (Alien): entry already present"]

    def test_duplicate_entry_message(self) -> None:
        error = DuplicateEntryError("Alien")
        assert str(error) == "entry already present"
        assert error.title == "Alien"
