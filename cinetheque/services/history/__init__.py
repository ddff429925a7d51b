"""
Historique annuler/rétablir du catalogue.

Exports :
- Command : Contrat d'une action réversible
- AddFilmCommand, EditFilmCommand, RemoveFilmCommand : Les trois actions du catalogue
- HistoryManager : Piles d'annulation et de rétablissement
"""

from cinetheque.services.history.commands import (
    AddFilmCommand,
    Command,
    EditFilmCommand,
    RemoveFilmCommand,
)
from cinetheque.services.history.manager import HistoryManager

__all__ = [
    "Command",
    "AddFilmCommand",
    "EditFilmCommand",
    "RemoveFilmCommand",
    "HistoryManager",
]
