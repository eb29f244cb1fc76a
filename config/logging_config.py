"""Process-wide logging setup."""

import logging
from typing import Optional

from config.defaults import LOG_LEVEL, LOG_FORMAT


def configure_logging(level: Optional[str] = None):
    """Configure the root logger once; later calls only adjust the level."""
    resolved = (level or LOG_LEVEL).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
    root.setLevel(resolved)
