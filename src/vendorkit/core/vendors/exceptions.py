"""Errors raised while attaching, detaching or scanning vendors."""
from __future__ import annotations

from vendorkit.core.exceptions import VendorkitError


class VendorError(VendorkitError):
    """Base exception for vendor subsystem errors."""


class DuplicateVendorError(VendorError, ValueError):
    """The import path is taken, or overlaps one that is."""


class UnknownVendorError(VendorError, LookupError):
    """Nothing is vendored at the requested import path."""


__all__ = [
    "VendorError",
    "DuplicateVendorError",
    "UnknownVendorError",
]
