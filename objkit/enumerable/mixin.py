"""Enumerable mixin built on one primitive.

A class composes :class:`Enumerable` by implementing ``_each()``, a generator
yielding every element exactly once. Everything else (folds, lookups,
projections) is derived from it, so containers never re-implement iteration
helpers on their own.
"""
from __future__ import annotations

from operator import attrgetter
from typing import Any, Iterator, List

from objkit.core.types import Predicate, T, Visitor


class Enumerable:
    """Iteration-derived operations for any class that defines ``_each``."""

    __slots__ = ()

    def _each(self) -> Iterator[Any]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return self._each()

    def each(self, visitor: Visitor) -> "Enumerable":
        """Call ``visitor(element, index)`` for every element and return ``self``."""

        for index, element in enumerate(self._each()):
            visitor(element, index)
        return self

    def map(self, fn: Visitor) -> List[Any]:
        return [fn(element) for element in self._each()]

    collect = map

    def inject(self, memo: T, fn: Visitor) -> T:
        """Fold the elements into ``memo`` using ``fn(memo, element)``."""

        for element in self._each():
            memo = fn(memo, element)
        return memo

    def detect(self, predicate: Predicate) -> Any:
        """Return the first element satisfying ``predicate`` (``None`` if none)."""

        for element in self._each():
            if predicate(element):
                return element
        return None

    find = detect

    def select(self, predicate: Predicate) -> List[Any]:
        return [element for element in self._each() if predicate(element)]

    def reject(self, predicate: Predicate) -> List[Any]:
        return [element for element in self._each() if not predicate(element)]

    def pluck(self, name: str) -> List[Any]:
        """Project attribute ``name`` out of every element."""

        getter = attrgetter(name)
        return [getter(element) for element in self._each()]

    def include(self, value: Any) -> bool:
        return any(element == value for element in self._each())

    def all(self, predicate: Predicate | None = None) -> bool:
        test = predicate or bool
        return all(test(element) for element in self._each())

    def any(self, predicate: Predicate | None = None) -> bool:
        test = predicate or bool
        return any(test(element) for element in self._each())

    def to_list(self) -> List[Any]:
        return list(self._each())

    def size(self) -> int:
        return sum(1 for _ in self._each())

    def first(self) -> Any:
        return next(self._each(), None)


__all__ = ["Enumerable"]
