# src/fourinarow/log.py

from __future__ import annotations
import logging

from fourinarow.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str | int = LOG_LEVEL) -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
