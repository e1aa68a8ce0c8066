"""Framework error types."""
from __future__ import annotations


class EnkiError(Exception):
    """Base class for errors raised by enki itself."""


class SinkUnavailable(EnkiError, OSError):
    """Raised when an exporter cannot open its output target."""


class ConfigError(EnkiError, ValueError):
    """Raised for invalid configuration files or values."""
