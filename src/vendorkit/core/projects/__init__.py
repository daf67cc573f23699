"""Project abstraction: plain directories, local git repositories and remote repositories."""
from __future__ import annotations

from .base import FetchableProject, LocalProject, Project, VersionedProject
from .factory import open_project, project_from_source
from .git import GitProject, RemoteGitProject
from .plain import PlainProject

__all__ = [
    "Project",
    "LocalProject",
    "FetchableProject",
    "VersionedProject",
    "PlainProject",
    "GitProject",
    "RemoteGitProject",
    "open_project",
    "project_from_source",
]
