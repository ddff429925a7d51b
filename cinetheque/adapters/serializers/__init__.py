"""
Adaptateurs de sérialisation du catalogue.

Exports :
- CsvFilmSerializer : Format CSV (RFC 4180, en-tête obligatoire)
- JsonFilmSerializer : Format JSON (tableau d'objets)
- default_serializers : Correspondance format -> sérialiseur
"""

from cinetheque.adapters.serializers.base import BaseFilmSerializer, check_catalog_path
from cinetheque.adapters.serializers.csv_serializer import CsvFilmSerializer
from cinetheque.adapters.serializers.json_serializer import JsonFilmSerializer
from cinetheque.core.value_objects import FileFormat


def default_serializers(encoding: str = "utf-8") -> dict[FileFormat, BaseFilmSerializer]:
    """Retourne un sérialiseur par format supporté."""
    return {
        FileFormat.CSV: CsvFilmSerializer(encoding=encoding),
        FileFormat.JSON: JsonFilmSerializer(encoding=encoding),
    }


__all__ = [
    "BaseFilmSerializer",
    "CsvFilmSerializer",
    "JsonFilmSerializer",
    "check_catalog_path",
    "default_serializers",
]
