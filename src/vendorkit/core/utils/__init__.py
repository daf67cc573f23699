"""Shared utilities: subprocess execution, filesystem helpers, paths, YAML I/O."""
from __future__ import annotations

__all__: list[str] = []
