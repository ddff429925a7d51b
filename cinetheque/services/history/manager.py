"""
Gestionnaire d'historique annuler/rétablir.

Deux piles : les commandes exécutées (annulables) et les commandes annulées
(rétablissables). Une nouvelle action réussie invalide toutes les actions
rétablissables.
"""

from typing import Optional

from loguru import logger

from cinetheque.services.history.commands import Command


class HistoryManager:
    """Piles d'annulation et de rétablissement."""

    def __init__(self) -> None:
        self._undo_stack: list[Command] = []
        self._redo_stack: list[Command] = []

    def run(self, command: Command) -> bool:
        """
        Exécute une commande et l'enregistre si elle réussit.

        Une exécution en échec (False ou exception) n'est enregistrée nulle
        part ; les exceptions sont propagées telles quelles.
        """
        if not command.execute():
            return False
        self._undo_stack.append(command)
        self._redo_stack.clear()
        logger.debug(f"Commande executee : {command.description}")
        return True

    def undo(self) -> bool:
        if not self._undo_stack:
            return False
        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)
        logger.debug(f"Commande annulee : {command.description}")
        return True

    def redo(self) -> bool:
        if not self._redo_stack:
            return False
        command = self._redo_stack.pop()
        command.execute()
        self._undo_stack.append(command)
        logger.debug(f"Commande retablie : {command.description}")
        return True

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def describe_undo(self) -> Optional[str]:
        """Libellé de la prochaine commande annulable, None si la pile est vide."""
        return self._undo_stack[-1].description if self._undo_stack else None

    def describe_redo(self) -> Optional[str]:
        return self._redo_stack[-1].description if self._redo_stack else None

    def clear(self) -> None:
        """Vide les deux piles (après un chargement ou un vidage du catalogue)."""
        self._undo_stack.clear()
        self._redo_stack.clear()
