"""Parsing of query strings produced by :meth:`Hash.to_query_string`."""
from __future__ import annotations

from typing import Dict, List
from urllib.parse import unquote

from objkit.core.types import QueryValue


def to_query_params(query: str, separator: str = "&") -> Dict[str, QueryValue]:
    """Parse ``query`` into a dict, collecting repeated keys into lists.

    A fragment without ``=`` maps its key to ``None``. ``+`` is kept
    literally, matching the ``encodeURIComponent`` style used on the way out.
    """

    match = query.strip().split("#", 1)[0]
    if match.startswith("?"):
        match = match[1:]
    if not match:
        return {}

    params: Dict[str, QueryValue] = {}
    for fragment in match.split(separator):
        if not fragment:
            continue
        raw_key, has_value, raw_value = fragment.partition("=")
        key = unquote(raw_key)
        value = unquote(raw_value) if has_value else None
        if key not in params:
            params[key] = value
            continue
        existing = params[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            collected: List[str | None] = [existing, value]  # type: ignore[list-item]
            params[key] = collected
    return params


__all__ = ["to_query_params"]
