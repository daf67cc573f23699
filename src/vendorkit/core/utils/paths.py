"""Project root resolution.

Resolution priority:
1. ``VENDORKIT_PROJECT_ROOT`` environment variable
2. Git repository root via ``git rev-parse --show-toplevel``
3. The current working directory
"""
from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional

PROJECT_ROOT_ENV = "VENDORKIT_PROJECT_ROOT"
PROJECT_CONFIG_DIRNAME = ".vendorkit"

# Root detected from the working directory on first use.
_PROJECT_ROOT_CACHE: Optional[Path] = None


def resolve_project_root() -> Path:
    """Resolve the root directory of the project being operated on.

    Returns:
        Path: Absolute path to project root
    """
    global _PROJECT_ROOT_CACHE

    # Environment overrides always win, even over a populated cache.
    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()

    if _PROJECT_ROOT_CACHE is not None:
        return _PROJECT_ROOT_CACHE

    root = Path.cwd().resolve()
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=root,
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired):
        result = None
    if result is not None and result.returncode == 0 and result.stdout.strip():
        root = Path(result.stdout.strip()).resolve()

    _PROJECT_ROOT_CACHE = root
    return root


def get_project_config_dir(repo_root: Path) -> Path:
    """Return ``<repo_root>/.vendorkit``."""
    return Path(repo_root) / PROJECT_CONFIG_DIRNAME


def reset_project_root_cache() -> None:
    global _PROJECT_ROOT_CACHE
    _PROJECT_ROOT_CACHE = None


__all__ = [
    "PROJECT_ROOT_ENV",
    "PROJECT_CONFIG_DIRNAME",
    "resolve_project_root",
    "get_project_config_dir",
    "reset_project_root_cache",
]
