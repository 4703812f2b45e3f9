"""Configure application logging using the Python standard library.

Diagnostics go to stderr so they never mix with receipts and menus on
stdout. Only the ``pos`` logger is configured; the root logger is left
alone.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``pos`` logger.

    Calling it again replaces the handler rather than adding a second one.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("pos")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
