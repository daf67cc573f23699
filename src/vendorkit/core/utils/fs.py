"""Filesystem helpers for installing and pruning vendored trees.

Copies are staged in a temporary sibling directory and renamed into place,
so a failed copy never leaves a partially written destination behind.
"""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)

IgnoreFn = Callable[[str, list[str]], Iterable[str]]


def copy_tree(src: Path, dst: Path, *, ignore: Optional[IgnoreFn] = None) -> Path:
    """Recursively copy ``src`` to ``dst`` atomically.

    Args:
        src: Existing source directory
        dst: Destination directory; must not exist yet
        ignore: Optional ``shutil.copytree`` ignore callable

    Returns:
        The destination path

    Raises:
        FileExistsError: If ``dst`` already exists
        NotADirectoryError: If ``src`` is not a directory
        OSError: If the copy or rename fails
    """
    src = Path(src)
    dst = Path(dst)
    if not src.is_dir():
        raise NotADirectoryError(f"Not a directory: {src}")
    if dst.exists():
        raise FileExistsError(f"Destination already exists: {dst}")

    dst.parent.mkdir(parents=True, exist_ok=True)
    staging = Path(tempfile.mkdtemp(prefix=f".{dst.name}.", suffix=".tmp", dir=dst.parent))
    try:
        # copytree requires a missing target; the staging dir only reserves the name.
        staging.rmdir()
        shutil.copytree(src, staging, ignore=ignore, symlinks=True)
        os.replace(staging, dst)
    except BaseException:
        if staging.exists():
            shutil.rmtree(staging, ignore_errors=True)
        raise
    logger.debug("Copied %s to %s", src, dst)
    return dst


def remove_tree(path: Path) -> None:
    """Delete ``path`` recursively. A missing path is not an error."""
    path = Path(path)
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.exists():
        shutil.rmtree(path)


def remove_subdirs_with_no_files(root: Path) -> list[Path]:
    """Remove every directory under ``root`` that holds no files, bottom-up.

    ``root`` itself is removed too when nothing is left in it. Directories
    that still contain a file anywhere below them are kept.

    Returns:
        The removed directories, deepest first
    """
    root = Path(root)
    if not root.is_dir() or root.is_symlink():
        return []

    removed: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, topdown=False):
        current = Path(dirpath)
        if filenames:
            continue
        if any((current / d).exists() for d in dirnames):
            continue
        current.rmdir()
        removed.append(current)
    return removed


__all__ = [
    "copy_tree",
    "remove_tree",
    "remove_subdirs_with_no_files",
]
