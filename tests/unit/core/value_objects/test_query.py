"""
Tests pour les objets valeur de requête et de persistance.
"""

import pytest

from cinetheque.core.entities.film import Film, ViewStatus
from cinetheque.core.value_objects import FileFormat, FilterCriteria, SearchField, Status


class TestFileFormat:
    """Tests pour FileFormat.parse et FileFormat.from_path."""

    @pytest.mark.parametrize("value", ["csv", "CSV", ".csv", " Csv "])
    def test_parse_csv(self, value: str) -> None:
        assert FileFormat.parse(value) is FileFormat.CSV

    def test_parse_returns_same_instance(self) -> None:
        assert FileFormat.parse(FileFormat.JSON) is FileFormat.JSON

    def test_extension(self) -> None:
        assert FileFormat.JSON.extension == "json"

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported format"):
            FileFormat.parse("xml")

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("films.JSON", FileFormat.JSON),
            ("~/films.json", FileFormat.JSON),
            ("films.txt", FileFormat.CSV),
            ("films", FileFormat.CSV),
        ],
    )
    def test_from_path_falls_back_on_unknown_extension(
        self, path: str, expected: FileFormat
    ) -> None:
        assert FileFormat.from_path(path, FileFormat.CSV) is expected


class TestSearchField:
    """Tests pour SearchField.parse."""

    def test_creator_is_director(self) -> None:
        """"creator" est accepté comme synonyme de "director"."""
        assert SearchField.parse("creator") is SearchField.DIRECTOR

    def test_parse_title(self) -> None:
        assert SearchField.parse("Title") is SearchField.TITLE

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValueError):
            SearchField.parse("genre")


class TestFilterCriteria:
    """Tests pour FilterCriteria."""

    @pytest.fixture
    def film(self) -> Film:
        return Film("Il Padrino", "F. Coppola", "1972", "Drama", 5, ViewStatus.WATCHED)

    def test_empty_criteria(self, film: Film) -> None:
        """Sans critère, tout film correspond."""
        criteria = FilterCriteria()
        assert criteria.is_empty
        assert criteria.matches(film)

    def test_genre_exact_ignoring_case(self, film: Film) -> None:
        assert FilterCriteria(genre="drama").matches(film)
        assert not FilterCriteria(genre="Dram").matches(film)

    def test_director_substring(self, film: Film) -> None:
        assert FilterCriteria(director="coppola").matches(film)

    def test_all_criteria_combined(self, film: Film) -> None:
        """Les critères sont cumulatifs."""
        criteria = FilterCriteria(
            genre="Drama",
            director="Coppola",
            release_year="1972",
            view_status=ViewStatus.WATCHED,
            rating=5,
        )
        assert not criteria.is_empty
        assert criteria.matches(film)
        assert not FilterCriteria(genre="Drama", rating=4).matches(film)

    def test_rating_zero_filters_unrated(self, film: Film) -> None:
        """rating=0 est un vrai critère (films non notés)."""
        assert not FilterCriteria(rating=0).is_empty
        assert not FilterCriteria(rating=0).matches(film)


class TestStatus:
    """Tests pour Status."""

    def test_truthiness_follows_success(self) -> None:
        assert Status(True, "ok")
        assert not Status(False, "ko")

    def test_is_frozen(self) -> None:
        status = Status(True, "ok")
        with pytest.raises(AttributeError):
            status.success = False
