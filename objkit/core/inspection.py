"""Generic string, debug and JSON rendering helpers.

These are the formatter capabilities consumed by the lang containers: they
take one value and return its string form. Containers opt into richer
rendering by exposing ``inspect()``, ``to_object()`` or ``to_list()``.
"""
from __future__ import annotations

import json
from typing import Any, Mapping

from .errors import SerializationError


def interpret(value: Any) -> str:
    """Return ``value`` as a string, with ``None`` becoming the empty string."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def inspect(value: Any) -> str:
    """Return the debug-oriented representation of ``value``."""

    renderer = getattr(value, "inspect", None)
    if callable(renderer) and not isinstance(value, type):
        return renderer()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(inspect(item) for item in value) + "]"
    if isinstance(value, Mapping):
        body = ", ".join(f"{inspect(key)}: {inspect(item)}" for key, item in value.items())
        return "{" + body + "}"
    return repr(value)


def _json_default(value: Any) -> Any:
    for attr in ("to_object", "to_list"):
        converter = getattr(value, attr, None)
        if callable(converter):
            return converter()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Encode ``value`` as a JSON string.

    Non-finite floats are rejected rather than emitted as bare ``NaN``.

    Raises:
        SerializationError: if the value (or something nested in it) has no
            JSON form.
    """

    try:
        return json.dumps(value, default=_json_default, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to encode value as JSON: {exc}") from exc


__all__ = ["inspect", "interpret", "to_json"]
