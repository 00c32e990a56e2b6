# src/foldertree/utils/log_setup.py
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(module)s]: %(message)s"


def setup_logging(log_level: str = "INFO") -> None:
    """Route log records to stderr so they never mix with printed trees."""
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s.", logging.getLevelName(level))
