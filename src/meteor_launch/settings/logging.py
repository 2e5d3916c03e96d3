"""
Centralized logging configuration.

Entry points call bootstrap_logging() once; modules only ever use
logging.getLogger(__name__).
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    config_path = Path('logging.ini')
    if config_path.exists():
        return config_path
    return None


def _get_log_level() -> str:
    """
    Read LOG_LEVEL from the environment.

    Defaults to INFO; invalid values fall back to INFO with a warning.
    """
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        return 'INFO'
    return log_level


def bootstrap_logging(debug: bool = False) -> None:
    """
    Bootstrap logging for the launch CLI.

    This function:
    1. Resolves the level from LOG_LEVEL (or DEBUG when debug is set)
    2. Loads logging.ini with logging.config.fileConfig() if one is present
    3. Otherwise falls back to basicConfig on stderr

    Args:
        debug: Force DEBUG level regardless of LOG_LEVEL
    """
    level_name = 'DEBUG' if debug else _get_log_level()
    level = getattr(logging, level_name)

    config_path = _find_logging_config()
    if config_path is None:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, stream=sys.stderr)
        logging.getLogger('meteor_launch').setLevel(level)
        return

    try:
        logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, stream=sys.stderr)
        return

    if 'LOG_LEVEL' in os.environ or debug:
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(level)
        logging.getLogger('meteor_launch').setLevel(level)

    logging.getLogger(__name__).debug(f"Logging configured from {config_path}")
