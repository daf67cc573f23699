"""Plain (non version-controlled) projects.

A plain project is a directory on disk. It is installed elsewhere by copying
its files and it holds its vendors as plain copies under ``<base>/vendor``.
"""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from vendorkit.core.config.domains.vendors import VendorsConfig
from vendorkit.core.projects.base import LocalProject, Project
from vendorkit.core.utils.fs import copy_tree, remove_subdirs_with_no_files, remove_tree
from vendorkit.core.vendors.exceptions import DuplicateVendorError, UnknownVendorError, VendorError
from vendorkit.core.vendors.models import Vendor, normalize_import_path, top_level_segment
from vendorkit.core.vendors.registry import mark_vendor_root, scan_vendors

logger = logging.getLogger(__name__)

_COPY_IGNORE = shutil.ignore_patterns(".git")


def _overlapping(import_path: str, existing: str) -> bool:
    """True when one import path equals or contains the other."""
    ours = import_path.split("/")
    theirs = existing.split("/")
    shortest = min(len(ours), len(theirs))
    return ours[:shortest] == theirs[:shortest]


class PlainProject(LocalProject):
    """A project rooted at a directory with no version-control linkage."""

    def __init__(self, base_dir: Optional[Path | str]) -> None:
        self.base_dir: Optional[Path] = Path(base_dir) if base_dir is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.base_dir) if self.base_dir else None!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainProject):
            return NotImplemented
        return type(self) is type(other) and self.base_dir == other.base_dir

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.base_dir))

    def get_base_dir(self) -> Optional[Path]:
        return self.base_dir

    # ---------- layout ----------

    def require_base_dir(self) -> Path:
        if self.base_dir is None:
            raise VendorError(f"{self!r} has no base directory")
        return self.base_dir

    def vendor_dirname(self) -> str:
        return VendorsConfig(repo_root=self.base_dir).directory

    def vendor_dir(self) -> Path:
        """Absolute directory holding this project's vendors."""
        return self.require_base_dir() / self.vendor_dirname()

    def vendor_relpath(self, import_path: str) -> str:
        """Location of a vendor relative to the base directory, POSIX style."""
        return f"{self.vendor_dirname()}/{import_path}"

    def vendor_path(self, import_path: str) -> Path:
        return self.vendor_dir() / import_path

    # ---------- Project ----------

    def install(self, destination: Path) -> LocalProject:
        """Copy this project's files (without ``.git``) to ``destination``.

        Raises:
            FileExistsError: If ``destination`` already exists
            OSError: If the copy fails; nothing is left at ``destination``
        """
        source = self.require_base_dir()
        copy_tree(source, Path(destination), ignore=_COPY_IGNORE)
        logger.info("Installed %s into %s", source, destination)
        return PlainProject(destination)

    # ---------- vendors ----------

    def get_vendors(self) -> dict[str, Vendor]:
        return scan_vendors(self, self.vendor_dir())

    def add_vendor(self, import_path: str, project: Project) -> Vendor:
        """Install ``project`` under ``vendor/<import_path>`` and register it.

        Args:
            import_path: Relative, slash separated identifier of the vendor
            project: Dependency to attach

        Returns:
            The new vendor

        Raises:
            ValueError: If ``import_path`` is malformed
            DuplicateVendorError: If ``import_path`` overlaps a registered vendor, or
                something already exists at its location
        """
        import_path = normalize_import_path(import_path)
        for existing in self.get_vendors():
            if _overlapping(import_path, existing):
                raise DuplicateVendorError(
                    f"Vendor {import_path!r} conflicts with existing vendor {existing!r}",
                    context={"import_path": import_path, "existing": existing},
                )

        destination = self.vendor_path(import_path)
        if destination.exists() or destination.is_symlink():
            raise DuplicateVendorError(
                f"Vendor path {destination} already exists",
                context={"import_path": import_path, "path": str(destination)},
            )
        installed = self._attach(import_path, project, destination)
        mark_vendor_root(destination)
        logger.info("Added vendor %s (%s)", import_path, type(installed).__name__)
        return Vendor(import_path, self, installed)

    def remove_vendor(self, import_path: str) -> None:
        """Delete the vendor at ``import_path`` and prune emptied directories.

        Raises:
            UnknownVendorError: If no vendor is registered at ``import_path``
        """
        import_path = normalize_import_path(import_path)
        vendor = self.get_vendors().get(import_path)
        if vendor is None:
            raise UnknownVendorError(
                f"No vendor registered at {import_path!r}",
                context={"import_path": import_path},
            )

        self._detach(vendor)
        self.prune_vendor_dirs(import_path)
        vendor.set_parent(None)
        logger.info("Removed vendor %s", import_path)

    def prune_vendor_dirs(self, import_path: str) -> list[Path]:
        """Remove empty directories left under ``vendor/<first segment>``."""
        return remove_subdirs_with_no_files(self.vendor_dir() / top_level_segment(import_path))

    # ---------- hooks ----------

    def _attach(self, import_path: str, project: Project, destination: Path) -> LocalProject:
        return project.install(destination)

    def _detach(self, vendor: Vendor) -> None:
        remove_tree(self.vendor_path(vendor.import_path))


__all__ = ["PlainProject"]
