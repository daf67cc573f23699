"""Shared plumbing for the per-section configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Read-only view of one top-level configuration section.

    Subclasses name their section and expose typed properties over it::

        class GitConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "git"

    The merged configuration is loaded once per project root through
    :func:`~vendorkit.core.config.cache.get_cached_config`.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self._repo_root = repo_root
        self._config = get_cached_config(repo_root=repo_root)

    @property
    def repo_root(self) -> Path:
        if self._repo_root:
            return Path(self._repo_root)

        from vendorkit.core.utils.paths import resolve_project_root

        return resolve_project_root()

    @abstractmethod
    def _config_section(self) -> str:
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        return self._config.get(self._config_section()) or {}


__all__ = ["BaseDomainConfig"]
