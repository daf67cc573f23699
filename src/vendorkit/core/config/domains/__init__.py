"""Domain-specific configuration accessors."""
from __future__ import annotations

from .git import GitConfig
from .logging import LoggingConfig
from .timeouts import TimeoutsConfig
from .vendors import VendorsConfig

__all__ = [
    "GitConfig",
    "LoggingConfig",
    "TimeoutsConfig",
    "VendorsConfig",
]
