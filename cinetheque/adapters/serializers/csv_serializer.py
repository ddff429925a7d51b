"""
Sérialiseur CSV du catalogue.

Format:
    title,creator,releaseYear,category,rating,viewStatus
    Il Padrino,F. Coppola,1972,Drama,5,WATCHED
    "Lock, Stock",G. Ritchie,1998,Comedy,unrated,TO_WATCH

Les champs contenant une virgule, un guillemet ou un saut de ligne sont
entourés de guillemets, les guillemets internes étant doublés. L'en-tête
est toujours écrit et ignoré à la lecture. La note est écrite sous sa forme
affichée ("unrated" ou le chiffre), le statut sous son nom interne.

La lecture utilise un découpage manuel tenant compte des guillemets afin de
rapporter chaque ligne fautive avec son numéro (l'en-tête est la ligne 1).
"""

import re
from collections.abc import Iterator
from typing import Sequence

from cinetheque.adapters.serializers.base import BaseFilmSerializer, RawRecord
from cinetheque.core.entities.film import Film
from cinetheque.core.errors import MalformedRecordError
from cinetheque.utils.constants import (
    CSV_HEADER,
    CSV_QUOTE,
    CSV_SEPARATOR,
    FILE_FIELDS,
)

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def escape_csv_field(value: str) -> str:
    """Entoure le champ de guillemets si nécessaire et double les guillemets internes."""
    if value is None:
        return ""
    if any(c in value for c in (CSV_SEPARATOR, CSV_QUOTE, "\n", "\r")):
        return CSV_QUOTE + value.replace(CSV_QUOTE, CSV_QUOTE * 2) + CSV_QUOTE
    return value


def split_csv_line(line: str) -> list[str]:
    """
    Découpe une ligne CSV en champs en respectant les guillemets.

    Raises:
        MalformedRecordError: Si un champ entre guillemets n'est pas refermé
    """
    fields: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        c = line[i]
        if c == CSV_QUOTE:
            if in_quotes and i + 1 < len(line) and line[i + 1] == CSV_QUOTE:
                # Guillemet echappe
                field.append(CSV_QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == CSV_SEPARATOR and not in_quotes:
            fields.append("".join(field))
            field = []
        else:
            field.append(c)
        i += 1

    if in_quotes:
        raise MalformedRecordError("invalid CSV format (unterminated quoted field)")
    fields.append("".join(field))
    return fields


def iter_csv_lines(content: str) -> Iterator[tuple[int, str]]:
    """
    Découpe le contenu en lignes logiques.

    Un saut de ligne entre guillemets fait partie du champ : la ligne logique
    continue alors sur la ligne physique suivante. Un guillemet jamais
    refermé avant la fin du fichier ne rend fautive que sa propre ligne
    physique ; la lecture reprend à la ligne suivante.

    Yields:
        (numéro de la première ligne physique, texte de la ligne logique)
    """
    parts = _LINE_BREAK.split(content)
    lines = parts[0::2]
    breaks = parts[1::2]
    if lines and not lines[-1]:
        lines.pop()

    index = 0
    while index < len(lines):
        text = lines[index]
        end = index
        while text.count(CSV_QUOTE) % 2 and end + 1 < len(lines):
            end += 1
            text += breaks[end - 1] + lines[end]
        if text.count(CSV_QUOTE) % 2:
            yield index + 1, lines[index]
            index += 1
            continue
        yield index + 1, text
        index = end + 1


class CsvFilmSerializer(BaseFilmSerializer):
    """Lecture et écriture du catalogue au format CSV."""

    extension = "csv"

    def encode(self, films: Sequence[Film]) -> str:
        lines = [CSV_HEADER]
        for film in films:
            lines.append(
                CSV_SEPARATOR.join(
                    [
                        escape_csv_field(film.title),
                        escape_csv_field(film.director),
                        escape_csv_field(film.release_year),
                        escape_csv_field(film.genre),
                        escape_csv_field(film.rating_display()),
                        film.view_status.name,
                    ]
                )
            )
        return "\n".join(lines) + "\n"

    def iter_records(self, content: str) -> Iterator[tuple[int, str]]:
        lines = iter_csv_lines(content)
        # En-tete obligatoire, ignore sans validation
        next(lines, None)
        for line_number, line in lines:
            if line.strip():
                yield line_number, line

    def parse_record(self, raw: str) -> RawRecord:
        fields = split_csv_line(raw)
        if len(fields) != len(FILE_FIELDS):
            raise MalformedRecordError(
                f"invalid CSV format (expected {len(FILE_FIELDS)} fields, found {len(fields)})"
            )
        return dict(zip(FILE_FIELDS, fields))

    def record_label(self, position: int) -> str:
        return f"row {position}"
