"""
Sérialiseur JSON du catalogue.

Format:
    [
      {
        "title": "Il Padrino",
        "creator": "F. Coppola",
        "releaseYear": "1972",
        "category": "Drama",
        "rating": 5,
        "viewStatus": "WATCHED"
      }
    ]

La note est écrite comme un nombre JSON, le statut sous son nom interne.

La lecture n'utilise pas json.loads : un scanner de profondeur d'accolades
isole chaque objet du tableau pour qu'un objet mal formé ne soit rejeté
que pour lui-même, puis un lecteur de paires "clé": valeur extrait les
champs dans n'importe quel ordre. Les clés inconnues sont ignorées, même
quand leur valeur est un tableau ou un objet ; une note absente vaut 0 et
un statut absent vaut TO_WATCH.
"""

import json
from collections.abc import Collection, Iterator
from typing import Optional, Sequence

from cinetheque.adapters.serializers.base import BaseFilmSerializer, RawRecord
from cinetheque.core.entities.film import Film, ViewStatus
from cinetheque.core.errors import CatalogIOError, MalformedRecordError
from cinetheque.utils.constants import (
    FIELD_CATEGORY,
    FIELD_CREATOR,
    FIELD_RATING,
    FIELD_RELEASE_YEAR,
    FIELD_TITLE,
    FIELD_VIEW_STATUS,
)

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_WHITESPACE = " \t\r\n"

_RECORD_FIELDS = (
    FIELD_TITLE,
    FIELD_CREATOR,
    FIELD_RELEASE_YEAR,
    FIELD_CATEGORY,
    FIELD_RATING,
    FIELD_VIEW_STATUS,
)


def split_json_objects(content: str) -> list[str]:
    """
    Isole les objets de premier niveau du contenu d'un tableau JSON.

    Les accolades à l'intérieur des chaînes sont ignorées, de même que les
    objets et tableaux imbriqués en valeur ("meta": {...}, "tags": [...]).
    Hors valeur, une accolade ouvrante rencontrée dans un objet encore
    ouvert termine l'objet précédent (accolade fermante manquante) ; une
    accolade fermante en trop produit un fragment isolé. Les fragments mal
    formés sont retournés tels quels pour être rejetés individuellement.

    Args:
        content: Texte compris entre les crochets du tableau

    Returns:
        Liste des fragments, dans l'ordre
    """
    chunks: list[str] = []
    buffer: list[str] = []
    depth = 0
    brackets = 0
    previous = ""
    in_string = False
    escaped = False

    def flush() -> None:
        text = "".join(buffer).strip()
        if text.endswith(","):
            text = text[:-1].rstrip()
        if text:
            chunks.append(text)
        buffer.clear()

    for c in content:
        if in_string:
            buffer.append(c)
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
                previous = c
            continue

        if c == '"':
            in_string = True
            buffer.append(c)
        elif c == "{":
            # Une accolade en position de valeur ouvre un objet imbrique
            if depth >= 1 and brackets == 0 and previous != ":":
                flush()
                depth = 0
            depth += 1
            buffer.append(c)
        elif c in "[]" and depth >= 1:
            brackets = brackets + 1 if c == "[" else max(brackets - 1, 0)
            buffer.append(c)
        elif c == "}":
            buffer.append(c)
            depth -= 1
            if depth <= 0:
                flush()
                depth = 0
                brackets = 0
        elif c == "," and depth == 0:
            flush()
        else:
            buffer.append(c)
        if c not in _WHITESPACE:
            previous = c

    flush()
    return chunks


class _PairReader:
    """Lecteur des paires "clé": valeur du corps d'un objet JSON plat."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        # Clés dont la valeur est un tableau ou un objet (lue comme None)
        self.compound_keys: set[str] = set()

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def _at_end(self) -> bool:
        self._skip_whitespace()
        return self.pos >= len(self.text)

    def _read_string(self) -> str:
        if self.text[self.pos] != '"':
            raise MalformedRecordError("invalid JSON format (string expected)")
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(self.text):
            c = self.text[self.pos]
            if c == '"':
                self.pos += 1
                return "".join(chars)
            if c == "\\":
                self.pos += 1
                if self.pos >= len(self.text):
                    break
                code = self.text[self.pos]
                if code == "u":
                    chars.append(self._read_unicode_escape())
                elif code in _ESCAPES:
                    chars.append(_ESCAPES[code])
                else:
                    raise MalformedRecordError(f"invalid JSON format (bad escape \\{code})")
            else:
                chars.append(c)
            self.pos += 1
        raise MalformedRecordError("invalid JSON format (unterminated string)")

    def _read_hex4(self, start: int) -> int:
        hex_digits = self.text[start : start + 4]
        if len(hex_digits) != 4 or any(h not in "0123456789abcdefABCDEF" for h in hex_digits):
            raise MalformedRecordError("invalid JSON format (bad \\u escape)")
        return int(hex_digits, 16)

    def _read_unicode_escape(self) -> str:
        """
        Décode \\uXXXX (self.pos sur le 'u'), y compris une paire de substitution
        \\uD83C\\uDFAC. Laisse self.pos sur le dernier chiffre lu.
        """
        code = self._read_hex4(self.pos + 1)
        self.pos += 4
        if 0xDC00 <= code <= 0xDFFF:
            raise MalformedRecordError("invalid JSON format (lone surrogate)")
        if 0xD800 <= code <= 0xDBFF:
            if self.text[self.pos + 1 : self.pos + 3] != "\\u":
                raise MalformedRecordError("invalid JSON format (lone surrogate)")
            low = self._read_hex4(self.pos + 3)
            if not 0xDC00 <= low <= 0xDFFF:
                raise MalformedRecordError("invalid JSON format (lone surrogate)")
            self.pos += 6
            code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
        return chr(code)

    def _skip_compound(self) -> None:
        """Passe un tableau ou un objet imbriqué, chaînes comprises."""
        depth = 0
        in_string = False
        escaped = False
        while self.pos < len(self.text):
            c = self.text[self.pos]
            self.pos += 1
            if in_string:
                if escaped:
                    escaped = False
                elif c == "\\":
                    escaped = True
                elif c == '"':
                    in_string = False
            elif c == '"':
                in_string = True
            elif c in "[{":
                depth += 1
            elif c in "]}":
                depth -= 1
                if depth == 0:
                    return
        raise MalformedRecordError("invalid JSON format (unterminated array or object)")

    def _read_bare(self) -> Optional[str]:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] != ",":
            self.pos += 1
        token = self.text[start : self.pos].strip()
        if not token or any(c in token for c in '"{}[]:'):
            raise MalformedRecordError("invalid JSON format (value expected)")
        return None if token == "null" else token

    def pairs(self) -> Iterator[tuple[str, Optional[str]]]:
        while not self._at_end():
            key = self._read_string()
            self._skip_whitespace()
            if self.pos >= len(self.text) or self.text[self.pos] != ":":
                raise MalformedRecordError(f"invalid JSON format (':' expected after '{key}')")
            self.pos += 1
            if self._at_end():
                raise MalformedRecordError(f"invalid JSON format (no value for '{key}')")
            if self.text[self.pos] in "[{":
                self._skip_compound()
                self.compound_keys.add(key)
                value = None
            elif self.text[self.pos] == '"':
                value = self._read_string()
            else:
                value = self._read_bare()
            yield key, value
            if self._at_end():
                return
            if self.text[self.pos] != ",":
                raise MalformedRecordError("invalid JSON format (',' expected between pairs)")
            self.pos += 1


def parse_json_object(
    chunk: str, scalar_keys: Collection[str] = ()
) -> dict[str, Optional[str]]:
    """
    Extrait les paires d'un objet sous forme de textes.

    Les valeurs tableau ou objet sont passées et lues comme None, sauf pour
    les clés de scalar_keys qui exigent une valeur simple.

    Raises:
        MalformedRecordError: Si l'objet n'est pas délimité par des accolades,
            si une paire est mal formée ou si une clé de scalar_keys porte
            une valeur composée
    """
    text = chunk.strip()
    if not (text.startswith("{") and text.endswith("}")):
        raise MalformedRecordError("invalid JSON format (unbalanced braces)")
    reader = _PairReader(text[1:-1])
    values = dict(reader.pairs())
    for key in scalar_keys:
        if key in reader.compound_keys:
            raise MalformedRecordError(f"invalid JSON format (scalar value expected for '{key}')")
    return values


class JsonFilmSerializer(BaseFilmSerializer):
    """Lecture et écriture du catalogue au format JSON."""

    extension = "json"

    def encode(self, films: Sequence[Film]) -> str:
        records = [
            {
                FIELD_TITLE: film.title,
                FIELD_CREATOR: film.director,
                FIELD_RELEASE_YEAR: film.release_year,
                FIELD_CATEGORY: film.genre,
                # Nombre JSON pour les consommateurs numeriques
                FIELD_RATING: film.rating,
                FIELD_VIEW_STATUS: film.view_status.name,
            }
            for film in films
        ]
        return json.dumps(records, indent=2, ensure_ascii=False) + "\n"

    def iter_records(self, content: str) -> Iterator[tuple[int, str]]:
        text = content.strip()
        if not (text.startswith("[") and text.endswith("]")):
            raise CatalogIOError("Invalid JSON file: a top-level array of films is expected.")
        for index, chunk in enumerate(split_json_objects(text[1:-1]), start=1):
            yield index, chunk

    def parse_record(self, raw: str) -> RawRecord:
        values = parse_json_object(raw, _RECORD_FIELDS)
        record = {
            FIELD_TITLE: values.get(FIELD_TITLE),
            FIELD_CREATOR: values.get(FIELD_CREATOR),
            FIELD_RELEASE_YEAR: values.get(FIELD_RELEASE_YEAR),
            FIELD_CATEGORY: values.get(FIELD_CATEGORY),
            FIELD_RATING: values.get(FIELD_RATING, "0"),
            FIELD_VIEW_STATUS: values.get(FIELD_VIEW_STATUS, ViewStatus.TO_WATCH.name),
        }
        return record

    def record_label(self, position: int) -> str:
        return f"entry #{position}"
