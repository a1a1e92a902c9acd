"""YAML loader for the config subsystem.

The helper here consumes one YAML file, validates it via models.py and returns
a typed object to the caller. Sections mirror :class:`ObjkitConfig`, so new
settings only require extending the models.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from objkit.core.errors import ConfigurationError

from .models import ObjkitConfig

_DEFAULT_CONFIG_DIR = Path("config")


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_config(path: Path | str = _DEFAULT_CONFIG_DIR / "objkit.yml") -> ObjkitConfig:
    """Load objkit.yml (``query`` and ``telemetry`` sections).

    Missing sections fall back to model defaults; unknown values inside a
    section fail validation and surface as :class:`ConfigurationError`.
    """

    data = _read_yaml(Path(path))
    try:
        return ObjkitConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config in {path}: {exc}") from exc


@lru_cache(maxsize=1)
def default_config() -> ObjkitConfig:
    """Return the shared default configuration used when callers pass none."""

    return ObjkitConfig()


__all__ = ["default_config", "load_config"]
