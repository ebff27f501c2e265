# core/logging_config.py

"""
Logging setup for the Student Records CLI.

Log records go to stderr so they never interleave with menu output on stdout.
Modules create their own loggers with `logging.getLogger(__name__)`.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configures the root logger with a single stderr handler.

    Args:
        level (str): Logging level name. Unknown names fall back to WARNING.

    Returns:
        The configured root logger.

    Notes:
        - Replaces any handlers already attached to the root logger, so repeated calls do not duplicate output.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    # getLevelName maps known names to ints and anything else to a "Level x" string
    level_value = logging.getLevelName(level.strip().upper())
    if not isinstance(level_value, int):
        level_value = logging.WARNING

    root_logger.setLevel(level_value)
    root_logger.handlers = [handler]

    return root_logger
