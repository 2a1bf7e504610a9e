"""Logging setup shared by the API, the Streamlit page and the pipeline."""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _default_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a stdout logger for `name`; handlers are attached only once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(_default_level())
        # uvicorn installs root handlers; avoid printing every line twice
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger
