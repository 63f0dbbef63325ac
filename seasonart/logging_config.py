"""
Configuration du logging de SeasonArt via loguru.

- Sortie console : colorée, niveau réglable par -v / -q
- Sortie fichier : JSON avec rotation, capture les backoffs TVmaze en détail
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_VERBOSITY_LEVELS = ("INFO", "DEBUG", "TRACE")


def level_from_verbosity(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """Traduit les options CLI -v/-q en niveau loguru.

    Args :
        verbose : Nombre de -v (0 = niveau par défaut de la configuration)
        quiet : Mode silencieux, seules les erreurs sont affichées
        default : Niveau utilisé sans -v ni -q
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/seasonart.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, ou None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Les 429 et backoffs sont toujours conservés
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        enqueue=True,
    )

    logger.debug(f"Logging configuré: {log_file} (rotation {rotation_size})")
