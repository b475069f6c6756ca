"""Runtime settings for the package sorter."""

import logging
import os

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

LOG_LEVEL_VAR = "SORTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _lookup(name, env_file=None):
    """Read a setting from the best available source.

    Resolution order:
        1. .env file (local development)
        2. os.environ

    Returns:
        The raw string, or None if the setting is not defined anywhere.
    """
    path = env_file if env_file is not None else find_dotenv(usecwd=True)
    value = dotenv_values(path).get(name)
    if value:
        logger.debug("%s loaded from .env file", name)
        return value

    value = os.environ.get(name)
    if value:
        logger.debug("%s loaded from environment variable", name)
        return value
    return None


def get_log_level(env_file=None) -> str:
    """Return the configured log level name.

    Args:
        env_file: Explicit path to a .env file. Defaults to the nearest
            .env found from the current working directory.

    Raises:
        ValueError: If the configured value is not a standard level name.
    """
    raw = _lookup(LOG_LEVEL_VAR, env_file)
    if raw is None:
        return DEFAULT_LOG_LEVEL

    level = raw.strip().upper()
    if level not in _LEVELS:
        raise ValueError(
            f"{LOG_LEVEL_VAR} must be one of {', '.join(_LEVELS)}, "
            f"got {raw!r}"
        )
    return level
