"""
Logging de City Explorer via loguru.

Deux sorties :
- stderr, colorée, au niveau choisi (suivi du serveur ou de la CLI)
- fichier JSON tournant, toujours en DEBUG : on y retrouve chaque cache hit/miss
  et chaque appel fournisseur, y compris ceux émis depuis le thread du store

Chaque enregistrement porte `component` (défaut "app"); les services peuvent
le préciser avec logger.bind(component="store").
"""

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _file_sink_options(rotation_size: str, retention_count: int) -> dict[str, Any]:
    return {
        "level": "DEBUG",
        "format": "{message}",
        "serialize": True,
        "rotation": rotation_size,
        "retention": retention_count,
        "compression": "zip",
        "enqueue": True,
    }


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/cityexplorer.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        log_level : Niveau minimum sur stderr, insensible à la casse
        log_file : Fichier JSON tournant, ou None pour stderr seul
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservées
    """
    logger.remove()
    logger.configure(extra={"component": "app"})

    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, **_file_sink_options(rotation_size, retention_count))

    logger.debug(
        f"Logging prêt (stderr={log_level.upper()}, fichier={log_file or 'aucun'})"
    )
