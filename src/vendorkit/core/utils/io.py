"""YAML file helpers for the configuration loader."""
from __future__ import annotations

import fcntl
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def read_yaml(path: Path, default: Any = None) -> Any:
    """Parse ``path`` under a shared lock; an empty document yields ``default``.

    Raises:
        OSError: The file cannot be opened
        yaml.YAMLError: The content is not valid YAML
    """
    with open(path, "r", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        try:
            data = yaml.safe_load(f)
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    return default if data is None else data


def iter_yaml_files(dir_path: Path) -> list[Path]:
    """YAML files directly in ``dir_path``, by name; none when it is missing."""
    if not dir_path.is_dir():
        return []
    return sorted(
        (p for p in dir_path.iterdir() if p.is_file() and p.suffix in YAML_SUFFIXES),
        key=lambda p: p.name,
    )


__all__ = ["read_yaml", "iter_yaml_files"]
