"""
Tests unitaires pour les stratégies de tri.

Vérifie l'ordre, l'insensibilité à la casse et la stabilité
(films de clé égale dans leur ordre d'origine, y compris en décroissant).
"""

import pytest

from cinetheque.core.entities.film import Film
from cinetheque.services.sorting import STRATEGIES, SortKey, get_strategy, sort_films


def _titles(films: list[Film]) -> list[str]:
    return [film.title for film in films]


@pytest.fixture
def films() -> list[Film]:
    return [
        Film("bravo", "Zed", "2001", "Drama", 3),
        Film("Alpha", "adam", "1999", "Drama", 5),
        Film("charlie", "Mona", "2010", "Drama", 3),
        Film("Delta", "mona", "1985", "Drama", 0),
    ]


class TestSortKey:
    """Tests pour SortKey.parse."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("title-asc", SortKey.TITLE_ASC),
            ("TITLE_DESC", SortKey.TITLE_DESC),
            ("creator-asc", SortKey.DIRECTOR_ASC),
            ("director-desc", SortKey.DIRECTOR_DESC),
            ("year-asc", SortKey.YEAR_ASC),
        ],
    )
    def test_parse(self, value: str, expected: SortKey) -> None:
        """La clé accepte la valeur, le nom et l'alias creator-*."""
        assert SortKey.parse(value) is expected

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown sort key"):
            SortKey.parse("genre-asc")

    def test_every_key_has_strategy_and_label(self) -> None:
        assert set(STRATEGIES) == set(SortKey)
        assert SortKey.RATING_DESC.label == "Rating (5-1)"


class TestSortStrategies:
    """Tests des huit stratégies."""

    def test_title_asc_ignores_case(self, films: list[Film]) -> None:
        assert _titles(sort_films(films, SortKey.TITLE_ASC)) == [
            "Alpha", "bravo", "charlie", "Delta",
        ]

    def test_title_desc(self, films: list[Film]) -> None:
        assert _titles(sort_films(films, "title-desc")) == [
            "Delta", "charlie", "bravo", "Alpha",
        ]

    def test_director_asc_is_stable(self, films: list[Film]) -> None:
        """Mona et mona sont égaux sans casse : ordre d'origine conservé."""
        assert _titles(sort_films(films, SortKey.DIRECTOR_ASC)) == [
            "Alpha", "charlie", "Delta", "bravo",
        ]

    def test_director_desc_is_stable(self, films: list[Film]) -> None:
        assert _titles(sort_films(films, SortKey.DIRECTOR_DESC)) == [
            "bravo", "charlie", "Delta", "Alpha",
        ]

    def test_rating_asc_is_stable(self, films: list[Film]) -> None:
        assert _titles(sort_films(films, SortKey.RATING_ASC)) == [
            "Delta", "bravo", "charlie", "Alpha",
        ]

    def test_rating_desc_is_stable(self, films: list[Film]) -> None:
        """En décroissant, les notes égales restent dans l'ordre d'origine."""
        assert _titles(sort_films(films, SortKey.RATING_DESC)) == [
            "Alpha", "bravo", "charlie", "Delta",
        ]

    def test_year_asc(self, films: list[Film]) -> None:
        assert _titles(sort_films(films, SortKey.YEAR_ASC)) == [
            "Delta", "Alpha", "bravo", "charlie",
        ]

    def test_year_desc(self, films: list[Film]) -> None:
        assert _titles(get_strategy("year-desc")(films)) == [
            "charlie", "bravo", "Alpha", "Delta",
        ]

    def test_input_not_modified(self, films: list[Film]) -> None:
        """Le tri retourne une nouvelle liste."""
        original = list(films)
        result = sort_films(films, SortKey.TITLE_DESC)
        assert films == original
        assert result is not films

    def test_no_key_keeps_order(self, films: list[Film]) -> None:
        result = sort_films(films, None)
        assert result == films
        assert result is not films

    def test_empty_list(self) -> None:
        assert sort_films([], SortKey.TITLE_ASC) == []
