"""
Interfaces ports (ABC) du domaine.

Exports :
- IFilmRepository : Collection de films faisant autorité
- IFilmSerializer : Lecture / écriture d'une liste de films dans un fichier
"""

from cinetheque.core.ports.repositories import IFilmRepository
from cinetheque.core.ports.serializer import IFilmSerializer

__all__ = [
    "IFilmRepository",
    "IFilmSerializer",
]
