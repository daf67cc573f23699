"""Vendor registry.

The registry is never stored: it is rebuilt from the filesystem each time
by scanning a project's vendor directory.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from vendorkit.core.vendors.models import Vendor

if TYPE_CHECKING:
    from vendorkit.core.git.service import GitService
    from vendorkit.core.projects.base import LocalProject

logger = logging.getLogger(__name__)

# Written into installed vendors that hold neither ``.git`` nor a file at their top level.
VENDOR_MARKER = ".vendorkit-vendor"


def is_vendor_unit(path: Path) -> bool:
    """A directory is a vendored project once it holds ``.git`` or any file."""
    if (path / ".git").exists():
        return True
    return any(child.is_file() for child in path.iterdir())


def mark_vendor_root(path: Path) -> bool:
    """Make ``path`` a vendor unit if its contents alone would not.

    Returns:
        True when the marker file was written.
    """
    if is_vendor_unit(path):
        return False
    (path / VENDOR_MARKER).touch()
    logger.debug("Marked %s as a vendor root", path)
    return True


def iter_vendor_dirs(vendor_root: Path) -> Iterator[tuple[str, Path]]:
    """Yield ``(import_path, directory)`` for every vendor unit under ``vendor_root``.

    Each top-level segment is descended until a unit is found; units are not
    searched for nested vendors.
    """
    if not vendor_root.is_dir():
        return

    pending: list[Path] = sorted(p for p in vendor_root.iterdir() if p.is_dir())
    while pending:
        current = pending.pop(0)
        if current.name.startswith(".") or current.is_symlink():
            continue
        if is_vendor_unit(current):
            yield current.relative_to(vendor_root).as_posix(), current
            continue
        children = sorted(p for p in current.iterdir() if p.is_dir())
        pending[0:0] = children


def scan_vendors(
    parent: LocalProject, vendor_root: Path, *, git: Optional[GitService] = None
) -> dict[str, Vendor]:
    """Build the import-path -> Vendor mapping for ``parent``.

    Vendors that are repository roots are opened with ``git``, or the active
    adapter when None.

    Returns:
        An empty mapping when ``vendor_root`` does not exist.

    Raises:
        OSError: If the vendor directory cannot be read.
    """
    from vendorkit.core.projects.factory import open_project

    vendors: dict[str, Vendor] = {}
    for import_path, directory in iter_vendor_dirs(vendor_root):
        vendors[import_path] = Vendor(import_path, parent, open_project(directory, git=git))
    logger.debug("Found %d vendor(s) under %s", len(vendors), vendor_root)
    return vendors


__all__ = ["VENDOR_MARKER", "is_vendor_unit", "iter_vendor_dirs", "mark_vendor_root", "scan_vendors"]
