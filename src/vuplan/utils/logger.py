"""Console logging for the ``vuplan`` logger tree.

Library modules only call ``get_logger(__name__)``; attaching a handler is left
to entry points such as the CLI.
"""
from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "vuplan"


def configure_logger(name: str = ROOT_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """Attach one stderr handler to ``name`` and set its level.

    Repeated calls reuse the existing handler and only change the level, so
    records never print twice.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the project root, e.g. ``get_logger(__name__)``."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if name is None or name == ROOT_LOGGER_NAME:
        return root
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)
