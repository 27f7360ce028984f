"""Logging for the FitTrack front ends.

Both the CLI and the Streamlit app call setup_logger once with the loaded
Settings. Console output goes to stderr; FITTRACK_LOG_FILE adds a rotating
file sink that keeps store warnings and flush failures across sessions.
"""

import sys
from pathlib import Path

from loguru import logger

from fittrack.config.settings import Settings

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
DEBUG_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def resolve_level(settings: Settings, debug: bool = False) -> str:
    return "DEBUG" if debug else settings.log_level


def setup_logger(settings: Settings, debug: bool = False) -> Path | None:
    """Replace loguru's sinks with the ones configured for FitTrack.

    Args:
        settings: Loaded settings (log level, log file, rotation and retention)
        debug: Force DEBUG level and show source locations on the console

    Returns:
        Resolved log file path, or None when only console logging is active
    """
    level = resolve_level(settings, debug)
    logger.remove()

    logger.add(
        sys.stderr,
        format=DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    log_path = settings.log_path
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression=settings.log_compression,
            encoding="utf-8",
            backtrace=True,
            diagnose=debug,
        )

    logger.debug(f"Logger initialized with level={level}, file={log_path}, data_dir={settings.data_dir}")
    return log_path
