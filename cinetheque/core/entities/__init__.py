"""
Entités métier du catalogue.

Exports:
- Film: Un film du catalogue, toujours valide
- ViewStatus: Statut de visionnage (à voir, en cours, vu)
"""

from cinetheque.core.entities.film import Film, ViewStatus

__all__ = [
    "Film",
    "ViewStatus",
]
