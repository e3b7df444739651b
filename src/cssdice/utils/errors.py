"""Typed exceptions for decoding, kind lookup and configuration."""


class GrammarError(ValueError):
    """Raised when text does not fit the grammar a decoder expects."""


class UnknownKindError(ValueError):
    """Raised when no generator is registered for a value kind."""


class ConfigError(ValueError):
    """Raised when configuration sources hold values that cannot be used."""
