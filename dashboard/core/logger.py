"""Logging setup for the dashboard CLI.

Console output stays short (level and message) so it reads well next to the
rich tables. The optional LOG_FILE sink keeps full call-site detail and is
serialized as JSON lines so metrics passes can be grepped later.
"""

import sys
from pathlib import Path

from loguru import logger

from dashboard.config.settings import Settings, settings

CONSOLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"


def resolve_log_level(verbose: bool, config: Settings = settings) -> str:
    """--verbose always wins over LOG_LEVEL."""
    return "DEBUG" if verbose else config.log_level


def setup_logger(
    verbose: bool = False,
    config: Settings = settings,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> str:
    """Route loguru to stderr and, when LOG_FILE is set, to a rotating JSON file.

    Returns:
        The effective log level
    """
    level = resolve_log_level(verbose, config)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, level=level, serialize=True, rotation=rotation, retention=retention)

    logger.debug(f"Logging to stderr{f' and {config.log_file}' if config.log_file else ''} at {level}")
    return level
