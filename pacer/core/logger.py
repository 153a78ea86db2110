"""Loguru sinks for the pacer.

Console output goes to stderr so it never mixes with the tables the CLI
prints on stdout. A file sink is added only when PACER_LOG_FILE is set.
"""

import sys
from pathlib import Path

from loguru import logger

from pacer.config.settings import Settings, settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(debug: bool = False, config: Settings = settings) -> str:
    """Replace loguru's default sink with the pacer's sinks.

    Args:
        debug: Force DEBUG instead of the configured LOG_LEVEL
        config: Settings supplying the level and the optional log file

    Returns:
        The level the sinks were configured with
    """
    level = "DEBUG" if debug else config.log_level
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Pace sets are small; a week of logs is plenty.
        logger.add(log_path, format=FILE_FORMAT, level=level, rotation="5 MB", retention="7 days")
        logger.debug(f"Logging to {log_path}")

    return level
