"""Timeouts applied to external commands."""
from __future__ import annotations

from functools import cached_property
from typing import Dict

from vendorkit.core.exceptions import ConfigError

from ..base import BaseDomainConfig

TIMEOUT_KEYS = ("git_operations_seconds", "default_seconds")


class TimeoutsConfig(BaseDomainConfig):
    """``timeouts.*``: seconds before a git command (or any other command) is killed."""

    def _config_section(self) -> str:
        return "timeouts"

    def _seconds(self, key: str) -> float:
        if key not in self.section:
            raise ConfigError(f"timeouts.{key} missing from configuration", context={"key": key})
        return float(self.section[key])

    @cached_property
    def git_operations_seconds(self) -> float:
        return self._seconds("git_operations_seconds")

    @cached_property
    def default_seconds(self) -> float:
        return self._seconds("default_seconds")

    def get_all_settings(self) -> Dict[str, float]:
        return {key: self._seconds(key) for key in TIMEOUT_KEYS}


__all__ = ["TimeoutsConfig"]
