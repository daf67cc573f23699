"""Exceptions shared across vendorkit."""
from __future__ import annotations

from typing import Any, Dict, Mapping


class VendorkitError(Exception):
    """Root of the vendorkit exception hierarchy.

    ``context`` holds structured details (paths, import paths, git argv) that
    the CLI reports alongside the message in JSON mode.
    """

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: Dict[str, Any] = dict(context or {})

    def to_json_error(self) -> Dict[str, Any]:
        return {
            "message": str(self),
            "code": type(self).__name__,
            "context": self.context,
        }


class ConfigError(VendorkitError, ValueError):
    """Configuration could not be parsed or does not match the schema."""


__all__ = [
    "VendorkitError",
    "ConfigError",
]
