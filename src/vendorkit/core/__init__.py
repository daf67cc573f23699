"""Core library for vendorkit: projects, vendors, git adapter and config."""
from __future__ import annotations

__all__: list[str] = []
