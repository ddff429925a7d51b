"""
Objet valeur pour le résultat d'une sauvegarde ou d'un chargement.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Status:
    """
    Résultat d'une opération de persistance.

    Attributs:
        success: True si l'opération a réussi
        message: Message lisible décrivant le résultat
    """

    success: bool
    message: str

    def __bool__(self) -> bool:
        return self.success
