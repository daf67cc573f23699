"""Process-wide logging setup for the vendorkit CLI."""
from __future__ import annotations

from .stdlib_logging import configure_stdlib_logging, configured_log_path, reset_stdlib_logging_for_tests

__all__ = ["configure_stdlib_logging", "configured_log_path", "reset_stdlib_logging_for_tests"]
