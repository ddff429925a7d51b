"""
Persistance du catalogue.

Exports :
- InMemoryFilmRepository : Collection en mémoire, persistée via les sérialiseurs
"""

from cinetheque.infrastructure.persistence.film_repository import InMemoryFilmRepository

__all__ = ["InMemoryFilmRepository"]
