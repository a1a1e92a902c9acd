"""Typed configuration models for objkit.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to the rest of the library. Every field has a default,
so an empty file (or no file at all) yields a usable configuration.
"""
from __future__ import annotations

import logging
import string
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Characters urllib.parse.quote never escapes, whatever safe_chars says
_ALWAYS_SAFE = frozenset(string.ascii_letters + string.digits + "_.-~")


class QueryStringConfig(BaseModel):
    """Query-string serialization settings used by ``Hash.to_query_string``.

    ``safe_chars`` lists the punctuation left unescaped next to ASCII letters
    and digits; the default matches ``encodeURIComponent``.
    """

    separator: str = Field("&", min_length=1)
    safe_chars: str = Field("-_.!~*'()")

    model_config = ConfigDict(frozen=True)

    @field_validator("safe_chars")
    @classmethod
    def _reject_structural_chars(cls, value: str) -> str:
        """Keys and values must never leak ``=``, ``&`` or ``%`` unescaped."""

        leaked = sorted(set(value) & {"=", "&", "%", "#"})
        if leaked:
            raise ValueError(f"safe_chars must not contain {''.join(leaked)!r}")
        return value

    @model_validator(mode="after")
    def _separator_always_escaped(self) -> "QueryStringConfig":
        """Every separator character must be percent-encoded inside keys and values."""

        unescaped = set(self.safe_chars) | _ALWAYS_SAFE
        clash = sorted(set(self.separator) & unescaped)
        if clash:
            raise ValueError(
                f"separator {self.separator!r} overlaps unescaped characters {''.join(clash)!r}"
            )
        return self


class TelemetryConfig(BaseModel):
    """Logging switches consumed by :func:`objkit.telemetry.configure_from_config`."""

    log_level: str = Field("INFO")
    logger_name: str = Field("objkit", min_length=1)
    log_dir: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ObjkitConfig(BaseModel):
    """Top-level config composed of the query-string and telemetry sections."""

    query: QueryStringConfig = Field(default_factory=QueryStringConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    model_config = ConfigDict(frozen=True)
