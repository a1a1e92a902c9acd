"""Hash: an associative container with enumerable and serialization helpers.

A :class:`Hash` owns a private ``dict``; construction always copies the
source so caller mappings are never aliased. Iteration yields :class:`Pair`
entries, which is the single primitive the :class:`Enumerable` mixin needs to
derive ``keys``, ``values``, ``index`` and the folds used by ``update`` and
``to_query_string``.
"""
from __future__ import annotations

import logging
from collections.abc import Set
from typing import Any, Dict, Iterator, List, Mapping, NamedTuple
from urllib.parse import quote

from objkit.config.loader import default_config
from objkit.config.models import QueryStringConfig
from objkit.core.errors import InvalidArgumentError
from objkit.core.inspection import inspect as inspect_value
from objkit.core.inspection import interpret
from objkit.core.inspection import to_json
from objkit.core.types import Key
from objkit.enumerable import Enumerable

logger = logging.getLogger("objkit.lang.hash")


class Pair(NamedTuple):
    """Single key/value entry, usable positionally or by name."""

    key: Key
    value: Any


class Hash(Enumerable):
    """Insertion-ordered key/value container.

    ``get``/``unset`` on a missing key return ``None`` instead of raising.
    Key lookups are exact membership tests, so keys that collide with Python
    attribute names (``"keys"``, ``"__class__"``) behave like any other key.
    """

    __slots__ = ("_object",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, source: "Hash | Mapping[Key, Any] | None" = None) -> None:
        self._object: Dict[Key, Any] = _copy_source(source)

    @classmethod
    def from_object(cls, source: "Hash | Mapping[Key, Any] | None" = None) -> "Hash":
        return cls(source)

    def _each(self) -> Iterator[Pair]:
        for key, value in self._object.items():
            yield Pair(key, value)

    # Protocol support --------------------------------------------------
    def __len__(self) -> int:
        return len(self._object)

    def __contains__(self, key: object) -> bool:
        return key in self._object

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hash):
            return NotImplemented
        return self._object == other._object

    def __repr__(self) -> str:
        return self.inspect()

    # Accessors ---------------------------------------------------------
    def set(self, key: Key, value: Any) -> Any:
        """Store ``value`` under ``key`` and return ``value``."""

        self._object[key] = value
        return value

    def get(self, key: Key) -> Any:
        """Return the value stored under ``key`` or ``None`` when absent."""

        return self._object.get(key)

    def unset(self, key: Key) -> Any:
        """Remove ``key`` and return its previous value (``None`` if absent)."""

        return self._object.pop(key, None)

    def to_object(self) -> Dict[Key, Any]:
        """Return a shallow copy of the data as a plain ``dict``."""

        return dict(self._object)

    to_template_replacements = to_object

    def keys(self) -> List[Key]:
        return self.pluck("key")

    def values(self) -> List[Any]:
        return self.pluck("value")

    def index(self, value: Any) -> Key | None:
        """Return the first key whose value strictly equals ``value``.

        Strict means no numeric coercion: ``1``, ``1.0`` and ``True`` are
        different values here even though Python compares them equal. Lists,
        dicts and other objects match by identity only.
        """

        match = self.detect(lambda pair: _strictly_equal(pair.value, value))
        if match is None:
            return None
        return match.key

    # Combination -------------------------------------------------------
    def merge(self, other: "Hash | Mapping[Key, Any]") -> "Hash":
        """Return a new Hash with ``other`` applied on top of a clone of ``self``."""

        return self.clone().update(other)

    def update(self, other: "Hash | Mapping[Key, Any]") -> "Hash":
        """Copy every entry of ``other`` into ``self`` (last write wins)."""

        source = Hash(other)
        logger.debug("Updating hash", extra={"size": len(self), "incoming": len(source)})
        return source.inject(self, _store_pair)

    def clone(self) -> "Hash":
        return Hash(self)

    # Rendering ---------------------------------------------------------
    def to_query_string(self, config: QueryStringConfig | None = None) -> str:
        """Turn the hash into its URL-encoded query string representation.

        List and tuple values repeat the key once per element. ``None`` (as a
        value or list element) renders the bare key without ``=``. Nested
        mappings, sets and containers are skipped.
        """

        settings = config or default_config().query

        def collect(results: List[str], pair: Pair) -> List[str]:
            key = _encode(pair.key, settings.safe_chars)
            values = pair.value
            if isinstance(values, (list, tuple)):
                results.extend(_to_query_pair(key, value, settings.safe_chars) for value in values)
            elif not _is_compound(values):
                results.append(_to_query_pair(key, values, settings.safe_chars))
            return results

        return settings.separator.join(self.inject([], collect))

    def inspect(self) -> str:
        """Return the debug-oriented string representation of the hash."""

        body = ", ".join(
            self.map(lambda pair: ": ".join(inspect_value(part) for part in pair))
        )
        return "#<Hash:{" + body + "}>"

    def to_json(self) -> str:
        return to_json(self.to_object())


def H(source: Hash | Mapping[Key, Any] | None = None) -> Hash:
    """Shorthand for :class:`Hash` construction."""

    return Hash(source)


def _copy_source(source: Any) -> Dict[Key, Any]:
    if source is None:
        return {}
    if isinstance(source, Hash):
        return source.to_object()
    if isinstance(source, Mapping):
        return dict(source)
    logger.debug("Rejected hash source", extra={"source_type": type(source).__name__})
    raise InvalidArgumentError(
        f"Hash source must be a mapping or Hash, got {type(source).__name__}"
    )


_SCALAR_TYPES = (type(None), bool, int, float, str, bytes)


def _strictly_equal(left: Any, right: Any) -> bool:
    if type(left) is not type(right):
        return False
    if isinstance(left, _SCALAR_TYPES):
        return left == right
    return left is right


def _store_pair(result: Hash, pair: Pair) -> Hash:
    result.set(pair.key, pair.value)
    return result


def _encode(value: Any, safe_chars: str) -> str:
    return quote(interpret(value), safe=safe_chars)


def _to_query_pair(key: str, value: Any, safe_chars: str) -> str:
    if value is None:
        return key
    return f"{key}={_encode(value, safe_chars)}"


def _is_compound(value: Any) -> bool:
    return isinstance(value, (Mapping, Set, Enumerable))


__all__ = ["H", "Hash", "Pair"]
