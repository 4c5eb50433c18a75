"""Logging configuration for the scattergram command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
the handler and level are set up here, once, by the CLI.
"""

import logging
import os
from typing import Optional

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


def setup_logging(name: str, level: Optional[str] = None) -> logging.Logger:
    """Configure logging for the application.

    The level comes from ``level`` when given, otherwise from the
    SCATTERGRAM_LOG_LEVEL environment variable, otherwise WARNING so that
    only skipped-school warnings reach stderr.

    Returns:
        Logger instance for the calling module
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Connection pool chatter is never useful here
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logging.getLogger(name)
