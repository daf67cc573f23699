"""
Bundled data files: configuration defaults (``config/``) and the JSON
schema the merged configuration is validated against (``schemas/``).
"""
from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """Return the filesystem path of bundled ``subpackage/filename``.

    >>> get_data_path("config", "defaults.yaml").name
    'defaults.yaml'
    """
    base = Path(str(resources.files(__name__) / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_json(subpackage: str, filename: str) -> dict[str, Any]:
    return json.loads(get_data_path(subpackage, filename).read_text(encoding="utf-8"))


def clear_caches() -> None:
    read_json.cache_clear()


__all__ = [
    "get_data_path",
    "read_json",
    "clear_caches",
]
