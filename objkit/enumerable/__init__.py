"""Reusable iteration mixin for containers exposing a single ``_each`` primitive."""

from .mixin import Enumerable

__all__ = ["Enumerable"]
