"""Domain-specific configuration for vendoring behaviour."""
from __future__ import annotations

from functools import cached_property
from typing import Optional

from ..base import BaseDomainConfig


class VendorsConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "vendors"

    @cached_property
    def directory(self) -> str:
        """Directory under a project's base that holds its vendors."""
        return str(self.section.get("directory") or "vendor")

    @cached_property
    def default_reference(self) -> str:
        return str(self.section.get("default_reference") or "master")

    @cached_property
    def preferred_remote(self) -> Optional[str]:
        value = self.section.get("preferred_remote")
        return str(value) if value else None


__all__ = ["VendorsConfig"]
