"""Build project handles from paths and command-line sources."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from vendorkit.core.git import GitService, NotAGitRepositoryError
from vendorkit.core.projects.base import LocalProject, Project
from vendorkit.core.projects.git import GitProject, RemoteGitProject
from vendorkit.core.projects.plain import PlainProject

logger = logging.getLogger(__name__)

# scheme://..., file://..., or scp-like user@host:path
_URI_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*://|[^@\s/]+@[^:\s/]+:)")


def open_project(path: Path | str, *, git: Optional[GitService] = None) -> LocalProject:
    """Open ``path`` as a :class:`GitProject` when it is a repository root, else as a plain project."""
    path = Path(path)
    if (path / ".git").exists():
        try:
            return GitProject.from_path(path, path, git=git)
        except NotAGitRepositoryError:
            logger.debug("%s has a .git entry but is not a repository root", path)
    return PlainProject(path)


def looks_like_uri(source: str) -> bool:
    return bool(_URI_RE.match(source))


def project_from_source(source: str, *, git: Optional[GitService] = None) -> Project:
    """Resolve a dependency given on the command line.

    An existing directory is opened with :func:`open_project`; a clone URI
    becomes a :class:`RemoteGitProject`.

    Raises:
        FileNotFoundError: If ``source`` is neither a directory nor a URI
    """
    candidate = Path(source).expanduser()
    if candidate.is_dir():
        return open_project(candidate.resolve(), git=git)
    if looks_like_uri(source):
        return RemoteGitProject(source, git=git)
    raise FileNotFoundError(f"Not a directory or repository URI: {source}")


__all__ = ["open_project", "project_from_source", "looks_like_uri"]
