"""Submodule attach strategies.

When a dependency is added to a :class:`~vendorkit.core.projects.git.GitProject`
the strategies in :data:`ATTACH_STRATEGIES` are tried in order. Each one
either attaches the dependency and returns the installed project, or
returns None to let the next one try. When none applies the dependency is
installed as a plain copy.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from vendorkit.core.git.exceptions import GitError
from vendorkit.core.projects.base import FetchableProject, LocalProject, Project, VersionedProject

if TYPE_CHECKING:
    from vendorkit.core.projects.git import GitProject

logger = logging.getLogger(__name__)

AttachStrategy = Callable[["GitProject", str, Project], Optional[LocalProject]]


@contextmanager
def submodule_transaction(parent: GitProject, import_path: str, uri: str) -> Iterator[str]:
    """Add ``uri`` as a submodule for ``import_path`` and undo it unless the block completes.

    Yields the submodule path relative to the parent's base directory. When
    the block raises anything, :class:`BaseException` included, the
    submodule is removed and its emptied directories pruned before the
    original exception propagates. A failed rollback is logged, never raised.
    """
    base_dir = parent.require_base_dir()
    target = parent.vendor_relpath(import_path)
    parent.git.add_submodule(base_dir, uri, target)

    committed = False
    try:
        yield target
        committed = True
    finally:
        if not committed:
            logger.warning("Rolling back submodule %s in %s", target, base_dir)
            try:
                parent.git.remove_submodule(base_dir, target)
                parent.prune_vendor_dirs(import_path)
                parent.prune_module_dirs(import_path)
            except (GitError, OSError) as exc:
                logger.error("Rollback of submodule %s failed: %s", target, exc)


def attach_fetchable(parent: GitProject, import_path: str, project: Project) -> Optional[LocalProject]:
    """Add a fetchable dependency as a submodule tracking its default branch."""
    if not isinstance(project, FetchableProject):
        return None
    with submodule_transaction(parent, import_path, project.get_git_uri()):
        installed = parent.open_checkout(parent.vendor_path(import_path))
    return installed


def attach_versioned_with_remote(
    parent: GitProject, import_path: str, project: Project
) -> Optional[LocalProject]:
    """Add a local repository as a submodule of its remote, pinned to its current reference."""
    if not isinstance(project, VersionedProject):
        return None
    remote = project.get_remote()
    if remote is None:
        return None

    uri = remote.get_git_uri()
    reference = project.get_reference()
    destination = parent.vendor_path(import_path)
    with submodule_transaction(parent, import_path, uri):
        parent.git.checkout(destination, reference)
        installed = parent.open_checkout(destination)
    logger.debug("Pinned %s to %s", import_path, reference)
    return installed


ATTACH_STRATEGIES: tuple[AttachStrategy, ...] = (
    attach_fetchable,
    attach_versioned_with_remote,
)


__all__ = [
    "ATTACH_STRATEGIES",
    "AttachStrategy",
    "attach_fetchable",
    "attach_versioned_with_remote",
    "submodule_transaction",
]
