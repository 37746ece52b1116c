"""Logging configuration for the AnimeApi provider using loguru.

Provides centralized logging setup with file rotation.
Use get_logger() to get a logger instance for any module.
"""

import sys

from loguru import logger as _base_logger

from models.config import get_data_path, settings

# Store configuration state to prevent re-initialization
_initialized = False


def configure_logging(debug: bool | None = None) -> None:
    """Configure loguru for the whole provider.

    Args:
        debug: If True, set console logging to DEBUG level. Defaults to
            settings.logging.debug.
    """
    global _initialized

    if _initialized:
        return

    if debug is None:
        debug = settings.logging.debug

    _base_logger.remove()

    console_level = "DEBUG" if debug else settings.logging.console_level
    _base_logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=console_level,
    )

    if settings.logging.log_to_file:
        log_dir = get_data_path()
        log_dir.mkdir(parents=True, exist_ok=True)
        _base_logger.add(
            log_dir / "animeapi.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation=settings.logging.rotation,
            retention=settings.logging.retention,
            compression="zip",
        )

    _initialized = True


def get_logger(name: str):
    """Get a configured logger instance for a module.

    Automatically configures logging if not already done.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured loguru logger instance
    """
    if not _initialized:
        configure_logging()

    return _base_logger.bind(name=name)
