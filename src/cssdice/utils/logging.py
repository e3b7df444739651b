"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers namespaced under ``cssdice``.
    - Allow an optional level override from configuration.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls never stack handlers.
    - The package never configures the root logger.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]

ROOT_LOGGER_NAME = "cssdice"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single stream handler to the package logger and set ``level``."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_cssdice_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._cssdice_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
