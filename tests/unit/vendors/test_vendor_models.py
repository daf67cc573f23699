"""Tests for the Vendor model and import path validation."""
from __future__ import annotations

from pathlib import Path

import pytest


class TestNormalizeImportPath:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("github.com/org/lib", "github.com/org/lib"),
            ("github.com//org/lib/", "github.com/org/lib"),
            ("github.com\\org\\lib", "github.com/org/lib"),
            ("lib", "lib"),
        ],
    )
    def test_canonical_form(self, raw: str, expected: str) -> None:
        from vendorkit.core.vendors import normalize_import_path

        assert normalize_import_path(raw) == expected

    @pytest.mark.parametrize("raw", ["", "/", "/etc/passwd", "a/../b", "..", "./a"])
    def test_rejected(self, raw: str) -> None:
        from vendorkit.core.vendors import normalize_import_path

        with pytest.raises(ValueError):
            normalize_import_path(raw)


class TestVendor:
    def test_base_dir_comes_from_project(self, tmp_path: Path) -> None:
        from vendorkit.core.projects import PlainProject
        from vendorkit.core.vendors import Vendor

        host = PlainProject(tmp_path / "host")
        vendor = Vendor("lib", host, PlainProject(tmp_path / "host" / "vendor" / "lib"))

        assert vendor.get_base_dir() == tmp_path / "host" / "vendor" / "lib"
        assert Vendor("lib", host).get_base_dir() is None

    def test_set_parent_detaches(self, tmp_path: Path) -> None:
        from vendorkit.core.projects import PlainProject
        from vendorkit.core.vendors import Vendor

        vendor = Vendor("lib", PlainProject(tmp_path), PlainProject(tmp_path / "vendor" / "lib"))
        vendor.set_parent(None)

        assert vendor.parent is None
        assert "lib" in repr(vendor)
