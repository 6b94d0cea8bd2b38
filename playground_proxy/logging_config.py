"""
Process-wide logging setup.

debug / info / warn / error map onto the standard logging levels; anything
else falls back to INFO. Debug runs get a verbose development format.
"""

import logging
import sys

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def parse_level(level: str) -> int:
    return LEVELS.get((level or "").strip().lower(), logging.INFO)


def configure_logging(level: str) -> int:
    """Install a stdout handler on the root logger; returns the numeric level."""
    numeric = parse_level(level)
    logging.basicConfig(
        level=numeric,
        format=DEBUG_LOG_FORMAT if numeric == logging.DEBUG else LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    return numeric
