"""Shared helpers for the vendorkit test-suite."""
