"""
Objets valeur immutables du catalogue.

Exports :
- Status : Résultat (succès, message) d'une sauvegarde ou d'un chargement
- FileFormat : Format de fichier supporté (CSV, JSON)
- SearchField : Champ de recherche textuelle (titre, réalisateur)
- FilterCriteria : Critères de filtrage combinables
"""

from cinetheque.core.value_objects.status import Status
from cinetheque.core.value_objects.query import FileFormat, FilterCriteria, SearchField

__all__ = [
    "Status",
    "FileFormat",
    "SearchField",
    "FilterCriteria",
]
