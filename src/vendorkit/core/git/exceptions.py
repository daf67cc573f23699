"""Git adapter exceptions.

Every failure surfaced by :class:`~vendorkit.core.git.service.GitService`
is one of these. ``NoRemoteError`` marks a normal state (a repository with
no remote configured) and callers are expected to handle it as such.
"""
from __future__ import annotations

from vendorkit.core.exceptions import VendorkitError


class GitError(VendorkitError):
    """Base exception for git adapter errors."""


class GitCommandError(GitError, RuntimeError):
    """Raised when a git command exits non-zero or its output cannot be parsed."""


class NotAGitRepositoryError(GitError):
    """Raised when a path is not inside a dedicated git repository."""


class NoRemoteError(GitError):
    """Raised when a repository has no remote configured."""


__all__ = [
    "GitError",
    "GitCommandError",
    "NotAGitRepositoryError",
    "NoRemoteError",
]
