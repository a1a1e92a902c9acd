"""Top-level package for objkit.

objkit provides two small data abstractions shared by the rest of a utility
library: :class:`~objkit.lang.hash.Hash`, an associative container with
enumerable and serialization helpers, and
:class:`~objkit.lang.range.ObjectRange`, a lazily enumerated value range.
Configuration and logging live in their own subpackages and stay import-safe.
"""

from .lang import H, Hash, ObjectRange, Pair, R, succ, to_query_params

__all__ = ["H", "Hash", "ObjectRange", "Pair", "R", "succ", "to_query_params"]
