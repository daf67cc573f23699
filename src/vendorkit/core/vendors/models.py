"""Vendor model.

A vendor is a named attachment of one project inside another, identified by
its import path. The import path doubles as the location of the installed
project under the parent's vendor directory.
"""
from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from vendorkit.core.projects.base import LocalProject


def normalize_import_path(import_path: str) -> str:
    """Validate ``import_path`` and return it in canonical ``a/b/c`` form.

    Raises:
        ValueError: If the path is empty, absolute, or has ``.``/``..`` segments.
    """
    raw = str(import_path).replace("\\", "/")
    if raw.startswith("/"):
        raise ValueError(f"Import path must be relative: {import_path!r}")
    segments = [seg for seg in raw.split("/") if seg]
    if not segments:
        raise ValueError("Import path must not be empty")
    if any(seg in {".", ".."} for seg in segments):
        raise ValueError(f"Import path must not contain '.' or '..' segments: {import_path!r}")
    return "/".join(segments)


def top_level_segment(import_path: str) -> str:
    return PurePosixPath(import_path).parts[0]


class Vendor:
    """A project installed under a parent project's vendor directory.

    Attributes:
        import_path: Hierarchical identifier, unique within the parent
        parent: Back-reference to the hosting project; None once detached
        project: The installed dependency
    """

    def __init__(
        self,
        import_path: str,
        parent: Optional[LocalProject],
        project: Optional[LocalProject] = None,
    ) -> None:
        self.import_path = import_path
        self.parent = parent
        self.project = project

    def get_base_dir(self) -> Optional[Path]:
        return self.project.get_base_dir() if self.project is not None else None

    def set_parent(self, parent: Optional[LocalProject]) -> None:
        self.parent = parent

    def __repr__(self) -> str:
        kind = type(self.project).__name__ if self.project is not None else None
        return f"Vendor(import_path={self.import_path!r}, project={kind})"


__all__ = ["Vendor", "normalize_import_path", "top_level_segment"]
