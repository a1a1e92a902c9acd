"""Core primitives shared across all subsystems.

This module aggregates common types, error classes and the generic
inspection/serialization helpers. Higher level packages import from here to
avoid circular dependencies.
"""

from . import errors, inspection, types

__all__ = ["errors", "inspection", "types"]
