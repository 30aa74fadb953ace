"""Logging configuration for the drop token service."""

import logging
import sys
from typing import Optional

from src.core.config import get_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once. Level defaults to DROP_TOKEN_LOG_LEVEL."""
    level_name = level or get_log_level()
    numeric_level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # SQL statements are only logged when explicitly requested through the engine's echo flag
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
