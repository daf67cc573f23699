"""Vendors: dependencies attached under a project's vendor directory.

Attach strategies live in :mod:`vendorkit.core.vendors.attach` and are
imported on demand, since they depend on the project classes.
"""
from __future__ import annotations

from .exceptions import DuplicateVendorError, UnknownVendorError, VendorError
from .models import Vendor, normalize_import_path
from .registry import scan_vendors

__all__ = [
    "Vendor",
    "normalize_import_path",
    "scan_vendors",
    "VendorError",
    "DuplicateVendorError",
    "UnknownVendorError",
]
