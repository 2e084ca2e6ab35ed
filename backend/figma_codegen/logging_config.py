"""Logging setup for the codegen package.

Module loggers (``figma_codegen.*``) only call ``logging.getLogger(__name__)``.
Entry points call ``get_codegen_logger()`` once, which attaches a log file
under ``LOG_DIR`` and a console handler to the package logger.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from figma_codegen import settings

LOG_DIR = Path(os.getenv("LOG_DIR", str(Path(__file__).parent.parent / "logs")))

FILE_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONSOLE_FORMAT = "%(asctime)s [%(name)s] %(message)s"

_configured_loggers: set[str] = set()


def _handler(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logger(name: str, filename: str) -> logging.Logger:
    """Attach file and console handlers to logger ``name``, once.

    Args:
        name: Logger name; children such as ``name.pipeline`` log through it
        filename: File created under ``LOG_DIR``

    Returns:
        The configured logger. Repeated calls return it unchanged.
    """
    logger = logging.getLogger(name)
    if name in _configured_loggers:
        return logger

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(level)
    # Handlers live here; root handlers would print every record twice
    logger.propagate = False
    logger.addHandler(_handler(
        logging.FileHandler(LOG_DIR / filename, encoding="utf-8"), FILE_FORMAT, level,
    ))
    logger.addHandler(_handler(logging.StreamHandler(), CONSOLE_FORMAT, level))

    _configured_loggers.add(name)
    return logger


def get_codegen_logger() -> logging.Logger:
    """Package logger for ``figma_codegen``, writing to ``codegen.log``."""
    return setup_logger("figma_codegen", "codegen.log")
