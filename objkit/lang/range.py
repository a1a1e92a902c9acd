"""ObjectRange: a lazily enumerated range between two boundaries.

Values are produced by repeatedly applying a successor operation to ``start``
for as long as :meth:`ObjectRange.include` holds. Termination is the caller's
contract: a successor that never passes ``end`` yields forever, and the range
does not cap iteration. Comparison or successor failures propagate unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from functools import singledispatch
from numbers import Number
from typing import Any, Iterator

from objkit.core.types import Successor
from objkit.enumerable import Enumerable


@singledispatch
def succ(value: Any) -> Any:
    """Return the value following ``value``.

    Objects may opt in by defining a ``succ()`` method.
    """

    method = getattr(value, "succ", None)
    if callable(method):
        return method()
    raise TypeError(f"No successor defined for {type(value).__name__}")


@succ.register(Number)
def _succ_number(value: Number) -> Number:
    if isinstance(value, bool):
        raise TypeError("No successor defined for bool")
    return value + 1  # type: ignore[operator]


@succ.register(str)
def _succ_str(value: str) -> str:
    if not value:
        raise TypeError("No successor defined for the empty string")
    return value[:-1] + chr(ord(value[-1]) + 1)


@succ.register(date)
def _succ_date(value: date) -> date:
    # datetime subclasses date, so it advances by one day as well
    return value + timedelta(days=1)


@dataclass(frozen=True, slots=True)
class ObjectRange(Enumerable):
    """Immutable range over ``start``..``end``.

    ``exclusive`` leaves ``end`` itself out of the range. Fields are stored as
    given; ``start > end`` simply produces an empty range.
    """

    start: Any
    end: Any
    exclusive: bool = False
    successor: Successor | None = field(default=None, compare=False, repr=False)

    def _each(self) -> Iterator[Any]:
        advance = self.successor or succ
        value = self.start
        while self.include(value):
            yield value
            value = advance(value)

    def include(self, value: Any) -> bool:
        """Determine whether ``value`` lies within the range."""

        if value < self.start:
            return False
        if self.exclusive:
            return value < self.end
        return value <= self.end

    def __contains__(self, value: Any) -> bool:
        return self.include(value)


def R(start: Any, end: Any, exclusive: bool = False, successor: Successor | None = None) -> ObjectRange:
    """Shorthand for :class:`ObjectRange` construction."""

    return ObjectRange(start, end, exclusive, successor)


__all__ = ["ObjectRange", "R", "succ"]
