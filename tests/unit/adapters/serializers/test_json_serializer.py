"""
Tests pour le sérialiseur JSON du catalogue.

Vérifie l'écriture (note numérique, statut par nom), la lecture des paires
dans n'importe quel ordre, les valeurs par défaut, et l'isolement des
objets mal formés lors du rejet agrégé.
"""

import json
from pathlib import Path

import pytest

from cinetheque.adapters.serializers import JsonFilmSerializer
from cinetheque.adapters.serializers.json_serializer import (
    parse_json_object,
    split_json_objects,
)
from cinetheque.core.entities.film import Film, ViewStatus
from cinetheque.core.errors import (
    AggregatedLoadError,
    CatalogIOError,
    InvalidExtensionError,
    MalformedRecordError,
)


def _obj(title: str = "Alien", **overrides) -> str:
    record = {
        "title": title,
        "creator": "R. Scott",
        "releaseYear": "1979",
        "category": "Horror",
        "rating": 4,
        "viewStatus": "WATCHED",
    }
    record.update(overrides)
    return json.dumps(record)


class TestSplitJsonObjects:
    """Tests du scanner de profondeur d'accolades."""

    def test_split_two_objects(self) -> None:
        assert split_json_objects('{"a": "1"}, {"b": "2"}') == ['{"a": "1"}', '{"b": "2"}']

    def test_braces_in_strings_ignored(self) -> None:
        """Les accolades dans une chaîne ne changent pas la profondeur."""
        chunks = split_json_objects('{"title": "a } b { c"}, {"title": "d"}')
        assert chunks == ['{"title": "a } b { c"}', '{"title": "d"}']

    def test_escaped_quote_in_string(self) -> None:
        chunks = split_json_objects(r'{"title": "say \"}\""}')
        assert chunks == [r'{"title": "say \"}\""}']

    def test_missing_closing_brace_isolated(self) -> None:
        """Une accolade fermante manquante n'absorbe pas l'objet suivant."""
        chunks = split_json_objects('{"a": "1", {"b": "2"}')
        assert chunks == ['{"a": "1"', '{"b": "2"}']

    def test_extra_closing_brace_isolated(self) -> None:
        chunks = split_json_objects('{"a": "1"}}, {"b": "2"}')
        assert chunks == ['{"a": "1"}', "}", '{"b": "2"}']

    def test_nested_values_stay_in_their_object(self) -> None:
        """Tableaux et objets en valeur ne coupent pas l'objet englobant."""
        chunks = split_json_objects('{"tags": [{"k": 1}, "b"], "meta": {"k": {}}}, {"b": "2"}')
        assert chunks == ['{"tags": [{"k": 1}, "b"], "meta": {"k": {}}}', '{"b": "2"}']

    def test_empty_array_content(self) -> None:
        assert split_json_objects("  \n ") == []


class TestParseJsonObject:
    """Tests du lecteur de paires."""

    def test_parse_strings_numbers_null(self) -> None:
        values = parse_json_object('{"title": "Al\\u00e9n\\n", "rating": 3, "viewStatus": null}')
        assert values == {"title": "Alén\n", "rating": "3", "viewStatus": None}

    def test_unbalanced_braces(self) -> None:
        with pytest.raises(MalformedRecordError, match="unbalanced braces"):
            parse_json_object('{"title": "Alien"')

    def test_missing_colon(self) -> None:
        with pytest.raises(MalformedRecordError):
            parse_json_object('{"title" "Alien"}')

    def test_missing_comma(self) -> None:
        with pytest.raises(MalformedRecordError):
            parse_json_object('{"title": "Alien" "rating": 3}')

    def test_empty_object(self) -> None:
        assert parse_json_object("{ }") == {}

    def test_surrogate_pair_escape(self) -> None:
        values = parse_json_object(r'{"title": "Film \ud83c\udfac"}')
        assert values["title"] == "Film 🎬"

    @pytest.mark.parametrize("text", [r"\ud83c", r"\udfac", r"\ud83cA"])
    def test_lone_surrogate_rejected(self, text: str) -> None:
        with pytest.raises(MalformedRecordError, match="lone surrogate"):
            parse_json_object('{"title": "' + text + '"}')

    def test_compound_values_read_as_none(self) -> None:
        values = parse_json_object('{"tags": ["a", "]"], "meta": {"k": [1]}, "title": "Alien"}')
        assert values == {"tags": None, "meta": None, "title": "Alien"}

    def test_compound_value_for_scalar_key_rejected(self) -> None:
        with pytest.raises(MalformedRecordError, match="scalar value expected for 'title'"):
            parse_json_object('{"title": ["Alien"]}', scalar_keys=("title",))

    def test_unterminated_compound_value(self) -> None:
        with pytest.raises(MalformedRecordError, match="unterminated array or object"):
            parse_json_object('{"tags": ["a", "b"}')


class TestJsonSave:
    """Tests d'écriture."""

    def test_save_is_valid_json(self, tmp_path: Path, padrino: Film, pulp_fiction: Film) -> None:
        """Le fichier produit est un JSON standard, note en nombre."""
        path = tmp_path / "catalogue.json"
        JsonFilmSerializer().save([padrino, pulp_fiction], path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == [
            {
                "title": "Il Padrino",
                "creator": "F. Coppola",
                "releaseYear": "1972",
                "category": "Drama",
                "rating": 5,
                "viewStatus": "WATCHED",
            },
            {
                "title": "Pulp Fiction",
                "creator": "Q. Tarantino",
                "releaseYear": "1994",
                "category": "Crime",
                "rating": 0,
                "viewStatus": "TO_WATCH",
            },
        ]

    def test_save_empty_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "catalogue.json"
        JsonFilmSerializer().save([], path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_round_trip_with_special_characters(self, tmp_path: Path) -> None:
        films = [
            Film('Le "Grand" {Bleu}', "L. Besson", "1988", "Drame", 4, ViewStatus.WATCHED),
            Film("Amélie, ou presque", "J.-P. Jeunet", "2001", "Comédie\\Romance"),
        ]
        path = tmp_path / "catalogue.json"
        serializer = JsonFilmSerializer()
        serializer.save(films, path)

        loaded = serializer.load(path)
        assert [(f.title, f.genre, f.rating) for f in loaded] == [
            (f.title, f.genre, f.rating) for f in films
        ]


class TestJsonLoad:
    """Tests de lecture et de rejet."""

    @pytest.fixture
    def write(self, tmp_path: Path):
        def _write(content: str, name: str = "catalogue.json") -> Path:
            path = tmp_path / name
            path.write_text(content, encoding="utf-8")
            return path

        return _write

    def test_keys_in_any_order_and_unknown_keys(self, write) -> None:
        path = write(
            '[{"viewStatus": "Watching", "rating": "unrated", "category": "Horror",'
            ' "releaseYear": "1979", "creator": "R. Scott", "title": "Alien", "extra": true}]'
        )
        films = JsonFilmSerializer().load(path)
        assert films == [Film("Alien", "R. Scott", "1979", "Horror")]
        assert films[0].view_status is ViewStatus.WATCHING
        assert films[0].rating == 0

    def test_unknown_compound_keys_ignored(self, write) -> None:
        """Des clés inconnues portant un tableau ou un objet n'invalident pas le film."""
        path = write("[" + _obj(tags=["a", "b"], meta={"k": 1}) + ", " + _obj("Heat") + "]")
        films = JsonFilmSerializer().load(path)
        assert [f.title for f in films] == ["Alien", "Heat"]

    def test_compound_title_rejected(self, write) -> None:
        path = write("[" + _obj(title=["Alien"]) + "]")
        with pytest.raises(AggregatedLoadError) as exc_info:
            JsonFilmSerializer().load(path)
        assert exc_info.value.errors == [
            "entry #1: invalid JSON format (scalar value expected for 'title')"
        ]

    def test_missing_rating_and_status_use_defaults(self, write) -> None:
        """Note absente : 0 ; statut absent : TO_WATCH."""
        path = write('[{"title": "Alien", "creator": "R. Scott", "releaseYear": "1979", "category": "Horror"}]')
        film = JsonFilmSerializer().load(path)[0]
        assert film.rating == 0
        assert film.view_status is ViewStatus.TO_WATCH

    def test_null_status_rejected(self, write) -> None:
        path = write("[" + _obj(viewStatus=None) + "]")
        with pytest.raises(AggregatedLoadError) as exc_info:
            JsonFilmSerializer().load(path)
        assert exc_info.value.errors[0].startswith("entry #1 (Alien): invalid or incomplete data (")

    def test_missing_title_is_validation_error(self, write) -> None:
        path = write('[{"creator": "R. Scott", "releaseYear": "1979", "category": "Horror"}]')
        with pytest.raises(AggregatedLoadError) as exc_info:
            JsonFilmSerializer().load(path)
        assert exc_info.value.errors[0].startswith("entry #1: invalid or incomplete data (")

    def test_duplicate_entry(self, write) -> None:
        path = write("[" + _obj() + ", " + _obj("ALIEN") + "]")
        with pytest.raises(AggregatedLoadError) as exc_info:
            JsonFilmSerializer().load(path)
        assert exc_info.value.errors == ["entry #2 (ALIEN): entry already present"]

    def test_malformed_object_does_not_hide_others(self, write) -> None:
        """Un objet sans accolade fermante est rejeté seul ; les suivants sont analysés."""
        broken = _obj("Broken")[:-1]
        path = write(
            "[\n" + broken + ",\n" + _obj("Heat", releaseYear="95") + ",\n" + _obj("Ok") + "\n]"
        )
        with pytest.raises(AggregatedLoadError) as exc_info:
            JsonFilmSerializer().load(path)

        errors = exc_info.value.errors
        assert len(errors) == 2
        assert errors[0] == "entry #1: invalid JSON format (unbalanced braces)"
        assert errors[1].startswith("entry #2 (Heat): invalid or incomplete data (")

    def test_not_an_array_is_fatal(self, write) -> None:
        path = write(_obj())
        with pytest.raises(CatalogIOError, match="top-level array"):
            JsonFilmSerializer().load(path)

    def test_empty_array(self, write) -> None:
        assert JsonFilmSerializer().load(write("[]")) == []

    def test_invalid_extension(self, write) -> None:
        path = write("[]", name="catalogue.bak.json")
        with pytest.raises(InvalidExtensionError):
            JsonFilmSerializer().load(path)
