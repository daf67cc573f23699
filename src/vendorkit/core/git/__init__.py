"""
Git adapter package for vendorkit core.

Keeps every git invocation behind :class:`GitService`. Project code obtains
the active adapter through :func:`get_git_service`; tests and embedders may
swap it with :func:`set_git_service`.
"""
from __future__ import annotations

from typing import Optional

from .exceptions import GitCommandError, GitError, NoRemoteError, NotAGitRepositoryError
from .service import CommandResult, GitService

_SERVICE: Optional[GitService] = None


def get_git_service() -> GitService:
    """Return the process-wide git adapter, creating it on first use."""
    global _SERVICE
    if _SERVICE is None:
        _SERVICE = GitService()
    return _SERVICE


def set_git_service(service: Optional[GitService]) -> Optional[GitService]:
    """Install ``service`` as the active adapter and return the previous one.

    Passing None resets to a lazily created default.
    """
    global _SERVICE
    previous = _SERVICE
    _SERVICE = service
    return previous


__all__ = [
    "CommandResult",
    "GitService",
    "GitError",
    "GitCommandError",
    "NotAGitRepositoryError",
    "NoRemoteError",
    "get_git_service",
    "set_git_service",
]
