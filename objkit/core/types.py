"""Shared type aliases for readability and contract enforcement.

Containers pass around keys, visitors and successor callables. Aliases defined
here keep the signatures of the lang and enumerable packages consistent.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, MutableMapping, Sequence, TypeAlias, TypeVar

T = TypeVar("T")

Key: TypeAlias = str
Visitor: TypeAlias = Callable[..., Any]
Predicate: TypeAlias = Callable[[Any], Any]
Successor: TypeAlias = Callable[[Any], Any]

JSONLike: TypeAlias = Mapping[str, Any]
MutableJSONLike: TypeAlias = MutableMapping[str, Any]
QueryValue: TypeAlias = str | None | Sequence[str | None]
