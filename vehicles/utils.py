# vehicles/utils.py
"""Logging setup shared by the vehicles service.

Every module logs through a child of the ``vehicles-api`` logger, so the
level and format only have to be set once, from ``LOG_LEVEL``.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

ROOT_LOGGER = "vehicles-api"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

def configure_logging(level=None):
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level, logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root

def get_logger(name):
    """Return the ``vehicles-api.<name>`` logger, configuring the root on first use."""
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
