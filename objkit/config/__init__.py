"""Configuration loading and validation package."""

from .loader import default_config, load_config
from .models import ObjkitConfig, QueryStringConfig, TelemetryConfig

__all__ = [
    "ObjkitConfig",
    "QueryStringConfig",
    "TelemetryConfig",
    "default_config",
    "load_config",
]
