"""
Interface port pour la persistance fichier du catalogue.

Chaque format (CSV, JSON) fournit un adaptateur implémentant ce contrat.
Toutes les erreurs sont signalées par une CatalogIOError (sous-classe d'OSError),
y compris l'erreur agrégée de validation au chargement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, Union

from cinetheque.core.entities.film import Film


class IFilmSerializer(ABC):
    """
    Interface de sérialisation d'une liste de films.

    Le chargement est tout-ou-rien : soit tous les enregistrements sont
    valides et la liste complète est retournée, soit une erreur est levée.
    """

    #: Extension attendue, sans le point (ex: "csv")
    extension: str

    @abstractmethod
    def save(self, films: Sequence[Film], path: Union[str, Path]) -> None:
        """Écrit les films dans le fichier, dans l'ordre donné."""
        ...

    @abstractmethod
    def load(self, path: Union[str, Path]) -> list[Film]:
        """
        Lit les films depuis le fichier.

        Raises :
            InvalidExtensionError : Extension absente, multiple ou incorrecte
            CatalogFileNotFoundError : Fichier inexistant
            AggregatedLoadError : Au moins un enregistrement invalide
        """
        ...
