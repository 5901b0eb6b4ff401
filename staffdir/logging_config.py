"""
Configuration du logging de StaffDir via loguru.

Les modules journalisent avec un contexte lié (``employee_id=...`` côté store et
service, ``request="GET /api/employees"`` posé par le middleware HTTP). Ce contexte
est rendu en fin de ligne sur la console, et conservé tel quel dans le fichier JSON.
"""

import sys

from loguru import logger

from .config import Settings

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>{extra[context]}\n{exception}"
)


def format_console(record: dict) -> str:
    """Format console : ajoute le contexte lié sous la forme `` [cle=valeur ...]``."""
    extra = {key: value for key, value in record["extra"].items() if key != "context"}
    record["extra"]["context"] = (
        " [" + " ".join(f"{key}={value}" for key, value in sorted(extra.items())) + "]"
        if extra
        else ""
    )
    return _CONSOLE_FORMAT


def configure_logging(settings: Settings) -> None:
    """Configure le logging à partir des paramètres de l'application.

    Args :
        settings : Paramètres (niveau console, fichier, rotation, rétention)
    """
    logger.remove()

    logger.add(sys.stderr, level=settings.log_level, format=format_console, colorize=True)

    # Fichier JSON : tous les niveaux, contexte lié inclus dans "extra"
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(settings.log_file))
