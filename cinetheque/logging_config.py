"""
Logging loguru de la CLI.

Deux sorties : stderr pour l'utilisateur, au niveau choisi par -v / -q ou
par CINETHEQUE_LOG_LEVEL, et un fichier JSON qui garde tout, y compris les
enregistrements rejetés au chargement (niveau DEBUG).
"""

import sys
from typing import Optional

from loguru import logger

from cinetheque.config import Settings

# Message seul en usage normal, emplacement du code en mode -vv
_CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"
_CONSOLE_DEBUG_FORMAT = (
    "<level>{level: <7}</level> | <cyan>{name}:{line}</cyan> | <level>{message}</level>"
)


def configure_logging(settings: Settings, console_level: Optional[str] = None) -> None:
    """
    Remplace les sorties loguru par celles de la CLI.

    Args:
        settings: Réglages (fichier de log, rotation, rétention, niveau par défaut)
        console_level: Niveau stderr imposé par la ligne de commande
    """
    level = (console_level or settings.log_level).upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_CONSOLE_DEBUG_FORMAT if level == "DEBUG" else _CONSOLE_FORMAT,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
    )
    logger.debug("Sorties de log en place", log_file=str(settings.log_file), console=level)
