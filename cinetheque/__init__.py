"""
Cinetheque - Gestion d'un catalogue personnel de films.

Ce package fournit le moteur du catalogue : validation des films,
collection en mémoire avec unicité, historique annuler/rétablir,
tris et persistance CSV / JSON avec validation stricte.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, erreurs, ports, objets valeur)
- services/ : Couche application (tris, historique, façade)
- adapters/ : Sérialiseurs de fichiers et interface CLI
- infrastructure/ : Repository en mémoire
"""

__version__ = "1.0.0"
