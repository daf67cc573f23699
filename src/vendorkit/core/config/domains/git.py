"""Domain-specific configuration for the git adapter."""
from __future__ import annotations

from functools import cached_property
from typing import List

from ..base import BaseDomainConfig


class GitConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "git"

    @cached_property
    def binary(self) -> str:
        return str(self.section.get("binary") or "git")

    @cached_property
    def extra_config(self) -> List[str]:
        """``key=value`` pairs passed to every git call as ``-c key=value``."""
        return [str(item) for item in (self.section.get("extra_config") or [])]


__all__ = ["GitConfig"]
