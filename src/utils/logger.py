"""Logging helpers for the game engine."""

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging with a compact formatter.

    The engine only logs; the CLI decides the level (``--verbose`` switches
    to DEBUG so every toggle and submission is traced).
    """
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger."""
    return logging.getLogger(name or "boggle")
