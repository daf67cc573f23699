"""Version-controlled projects.

:class:`GitProject` is a plain project backed by a git working tree. It
knows its checked-out reference and, possibly, a remote; dependencies that
can be fetched are attached to it as submodules rather than copies.

:class:`RemoteGitProject` is a repository known only by its clone URI.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from vendorkit.core.config.domains.vendors import VendorsConfig
from vendorkit.core.git import GitService, NoRemoteError, NotAGitRepositoryError, get_git_service
from vendorkit.core.git.redaction import redact_url_credentials
from vendorkit.core.projects.base import FetchableProject, LocalProject, Project, VersionedProject
from vendorkit.core.projects.plain import PlainProject
from vendorkit.core.utils.fs import remove_subdirs_with_no_files
from vendorkit.core.vendors.models import Vendor, top_level_segment
from vendorkit.core.vendors.registry import scan_vendors

logger = logging.getLogger(__name__)

# Remote lookup state before the first call to GitProject.get_remote().
_NOT_CHECKED = object()


class GitProject(PlainProject, VersionedProject):
    """A local project whose base directory is the root of a git repository."""

    def __init__(self, base_dir: Optional[Path | str], *, git: Optional[GitService] = None) -> None:
        super().__init__(base_dir)
        self._git = git
        self._reference: Optional[str] = None
        self._remote: object = _NOT_CHECKED

    @property
    def git(self) -> GitService:
        return self._git or get_git_service()

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        root_path: Path | str,
        *,
        git: Optional[GitService] = None,
    ) -> GitProject:
        """Open the repository containing ``path``.

        Args:
            path: Directory inside the repository
            root_path: Directory the repository root is expected to be; a root
                found above it belongs to some enclosing repository

        Raises:
            NotAGitRepositoryError: If ``path`` is not in a repository, or the
                repository root lies above ``root_path``
        """
        service = git or get_git_service()
        root = Path(service.get_root_dir(path)).resolve()
        expected = Path(root_path).resolve()
        if len(str(root)) < len(str(expected)):
            raise NotAGitRepositoryError(
                f"Not a git repository: {path} (enclosing repository at {root})",
                context={"path": str(path), "root": str(root), "expected_root": str(expected)},
            )
        return cls(root, git=git)

    # ---------- VersionedProject ----------

    def get_reference(self) -> str:
        if self.base_dir is None:
            return VendorsConfig().default_reference
        if self._reference is None:
            self._reference = self.git.get_current_revision(self.base_dir)
        return self._reference

    def get_remote(self) -> Optional[RemoteGitProject]:
        """Return this project's fetch remote, or None when it has none.

        The lookup runs once. Failures other than a missing remote are
        raised and the next call tries again.
        """
        if self._remote is _NOT_CHECKED:
            if self.base_dir is None:
                self._remote = None
            else:
                try:
                    uri = self.git.get_remote_uri(self.base_dir)
                except NoRemoteError:
                    logger.debug("No remote configured for %s", self.base_dir)
                    self._remote = None
                else:
                    self._remote = RemoteGitProject(uri, git=self._git)
        return self._remote  # type: ignore[return-value]

    # ---------- vendors ----------

    def get_vendors(self) -> dict[str, Vendor]:
        return scan_vendors(self, self.vendor_dir(), git=self._git)

    def open_checkout(self, directory: Path) -> GitProject:
        """Handle over a repository checked out at ``directory``, sharing this project's adapter."""
        return type(self).from_path(directory, directory, git=self._git)

    def modules_dir(self) -> Path:
        """Where git keeps the metadata of submodules under the vendor directory."""
        return self.require_base_dir() / ".git" / "modules" / self.vendor_dirname()

    def prune_module_dirs(self, import_path: str) -> list[Path]:
        return remove_subdirs_with_no_files(self.modules_dir() / top_level_segment(import_path))

    def _attach(self, import_path: str, project: Project, destination: Path) -> LocalProject:
        from vendorkit.core.vendors.attach import ATTACH_STRATEGIES

        for strategy in ATTACH_STRATEGIES:
            installed = strategy(self, import_path, project)
            if installed is not None:
                return installed
        return super()._attach(import_path, project, destination)

    def _detach(self, vendor: Vendor) -> None:
        if not isinstance(vendor.project, GitProject):
            super()._detach(vendor)
            return
        self.git.remove_submodule(self.require_base_dir(), self.vendor_relpath(vendor.import_path))
        self.prune_module_dirs(vendor.import_path)


class RemoteGitProject(FetchableProject):
    """A git repository identified only by the URI it is cloned from."""

    def __init__(self, uri: str, *, git: Optional[GitService] = None) -> None:
        self.uri = uri
        self._git = git

    def __repr__(self) -> str:
        return f"RemoteGitProject({redact_url_credentials(self.uri)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteGitProject):
            return NotImplemented
        return self.uri == other.uri

    def __hash__(self) -> int:
        return hash(("RemoteGitProject", self.uri))

    @property
    def git(self) -> GitService:
        return self._git or get_git_service()

    def get_git_uri(self) -> str:
        return self.uri

    def install(self, destination: Path) -> GitProject:
        """Clone into ``destination`` and open the clone."""
        self.git.clone(destination, self.uri)
        logger.info("Cloned %s into %s", redact_url_credentials(self.uri), destination)
        return GitProject.from_path(destination, destination, git=self._git)


__all__ = ["GitProject", "RemoteGitProject"]
