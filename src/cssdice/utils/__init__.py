"""Shared helpers: typed exceptions and logger configuration."""

from .errors import ConfigError, GrammarError, UnknownKindError
from .logging import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "GrammarError",
    "UnknownKindError",
    "configure_logging",
    "get_logger",
]
