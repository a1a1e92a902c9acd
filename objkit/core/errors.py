"""Error hierarchy shared by the objkit subsystems.

Lookups of missing keys never raise; the classes below cover the situations
where failing fast is the documented behavior (bad arguments, bad config,
values JSON cannot encode). Submodules should raise the most specific error
available.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the library."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class InvalidArgumentError(CoreError, TypeError):
    """Raised when a Hash is built from something that is not a mapping."""


class SerializationError(CoreError):
    """Raised when a value cannot be rendered as JSON."""
