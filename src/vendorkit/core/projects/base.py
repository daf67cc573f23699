"""Project capability interfaces.

A project is anything that can be installed somewhere. Local projects also
live in a base directory and hold vendors. Two more capabilities drive how a
dependency gets attached:

- ``FetchableProject``: exposes a URI git can clone from.
- ``VersionedProject``: a local project with a resolvable reference and an
  optional fetchable remote.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from vendorkit.core.vendors.models import Vendor


class Project(ABC):
    """Something that can be materialized at a destination path."""

    @abstractmethod
    def install(self, destination: Path) -> LocalProject:
        """Materialize this project at ``destination`` and return a handle to the copy."""
        ...


class LocalProject(Project):
    """A project living in a directory, able to hold vendors."""

    @abstractmethod
    def get_base_dir(self) -> Optional[Path]:
        ...

    @abstractmethod
    def get_vendors(self) -> dict[str, Vendor]:
        ...

    @abstractmethod
    def add_vendor(self, import_path: str, project: Project) -> Vendor:
        ...

    @abstractmethod
    def remove_vendor(self, import_path: str) -> None:
        ...


class FetchableProject(Project):
    @abstractmethod
    def get_git_uri(self) -> str:
        """Return a URI git can clone from."""
        ...


class VersionedProject(LocalProject):
    @abstractmethod
    def get_reference(self) -> str:
        """Return the checked-out revision, usable with ``git checkout``."""
        ...

    @abstractmethod
    def get_remote(self) -> Optional[FetchableProject]:
        """Return the project as seen from its remote, or None without one."""
        ...


__all__ = [
    "Project",
    "LocalProject",
    "FetchableProject",
    "VersionedProject",
]
