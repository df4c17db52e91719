# -*- coding: utf-8 -*-
"""
Logging Configuration — diagnostic-stream logger for the CLI.

Log records go to stderr, never to stdout, so that test-set records on
stdout can be redirected to a file untouched.

Author
------
Ava Courtney

License
-------
MIT License
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``mapcode_te`` logger.

    Parameters
    ----------
    level : int
        Logging level, e.g. ``logging.INFO``.
    log_file : str, optional
        Also write log records to this file.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger("mapcode_te")
    logger.setLevel(level)

    # Avoid duplicate handlers when main() runs more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(file_handler)

    return logger
