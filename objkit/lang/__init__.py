"""Language-level data abstractions: Hash, ObjectRange and query parsing."""

from .hash import H, Hash, Pair
from .query import to_query_params
from .range import ObjectRange, R, succ

__all__ = ["H", "Hash", "ObjectRange", "Pair", "R", "succ", "to_query_params"]
