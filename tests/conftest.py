"""
Fixtures pytest partagees pour les tests Cinetheque.

Ce module contient les fixtures communes utilisees dans les tests:
- Films de reference (Il Padrino, Pulp Fiction...)
- Repository en memoire, historique et facade neufs pour chaque test
"""

import pytest

from cinetheque.core.entities.film import Film, ViewStatus
from cinetheque.infrastructure.persistence import InMemoryFilmRepository
from cinetheque.services.history import HistoryManager
from cinetheque.services.videotheque import VideothequeService


@pytest.fixture
def padrino() -> Film:
    """Il Padrino, note 5, vu."""
    return Film("Il Padrino", "F. Coppola", "1972", "Drama", 5, ViewStatus.WATCHED)


@pytest.fixture
def pulp_fiction() -> Film:
    """Pulp Fiction, non note, a voir."""
    return Film("Pulp Fiction", "Q. Tarantino", "1994", "Crime")


@pytest.fixture
def jackie_brown() -> Film:
    """Deuxieme film de Tarantino, pour les recherches par realisateur."""
    return Film("Jackie Brown", "Q. Tarantino", "1997", "Crime", 3, ViewStatus.WATCHING)


@pytest.fixture
def sample_films(padrino: Film, pulp_fiction: Film, jackie_brown: Film) -> list[Film]:
    """Trois films distincts, dans l'ordre d'insertion."""
    return [padrino, pulp_fiction, jackie_brown]


@pytest.fixture
def repository() -> InMemoryFilmRepository:
    """Repository vide avec les serialiseurs par defaut."""
    return InMemoryFilmRepository()


@pytest.fixture
def filled_repository(
    repository: InMemoryFilmRepository, sample_films: list[Film]
) -> InMemoryFilmRepository:
    """Repository contenant sample_films."""
    for film in sample_films:
        repository.add(film)
    return repository


@pytest.fixture
def history() -> HistoryManager:
    return HistoryManager()


@pytest.fixture
def service(repository: InMemoryFilmRepository, history: HistoryManager) -> VideothequeService:
    """Facade sur un repository vide."""
    return VideothequeService(repository, history)
