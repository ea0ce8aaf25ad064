"""
Observability Layer

RESPONSIBILITY: Logging configuration for the engine, loader, API and CLI
ALLOWED INPUTS: Log records from the ``lifetimes`` and ``ingestion`` namespaces
OUTPUTS: Console (stdout) and optional file logs

WHAT THIS LAYER MUST NOT DO:
============================
- Modify layout behaviour
- Filter or interpret events (only record them)
- Be called from the pure core (modules there only own a module logger)
"""

from __future__ import annotations
import logging
import sys
from typing import Optional, Sequence

LOG_NAMESPACES = ("lifetimes", "ingestion")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    namespaces: Sequence[str] = LOG_NAMESPACES,
) -> None:
    """
    Configure the package loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to.
        namespaces: Logger names to configure.

    Calling it again replaces the handlers instead of stacking duplicates.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in namespaces:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger(namespaces[0]).debug("Logging initialized.")
