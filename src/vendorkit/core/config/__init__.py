"""
vendorkit configuration package.

Layered YAML configuration (bundled defaults, project overrides,
environment overrides) with typed per-domain accessors.
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .domains import GitConfig, LoggingConfig, TimeoutsConfig, VendorsConfig
from .manager import ConfigManager

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "get_cached_config",
    "clear_all_caches",
    "GitConfig",
    "LoggingConfig",
    "TimeoutsConfig",
    "VendorsConfig",
]
