"""Per-project cache of the merged configuration."""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

_config_cache: Dict[str, Dict[str, Any]] = {}


def _normalize_repo_root(repo_root: Optional[Path]) -> Path:
    if repo_root is None:
        from vendorkit.core.utils.paths import resolve_project_root

        return resolve_project_root()
    return Path(repo_root).expanduser().resolve()


def _cache_key(repo_root: Path) -> str:
    # Key covers VENDORKIT_* variables and the project config files' mtime and size.
    env_items = sorted((k, v) for k, v in os.environ.items() if k.startswith("VENDORKIT_"))
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]

    from vendorkit.core.utils.io import iter_yaml_files
    from vendorkit.core.utils.paths import get_project_config_dir

    files = []
    for p in iter_yaml_files(get_project_config_dir(repo_root) / "config"):
        st = p.stat()
        files.append((p.name, st.st_mtime_ns, st.st_size))
    cfg_fp = hashlib.sha256(repr(files).encode("utf-8")).hexdigest()[:12]

    return f"{repo_root}:env={env_fp}:cfg={cfg_fp}"


def get_cached_config(repo_root: Optional[Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Return the merged configuration of ``repo_root`` (auto-detected when None).

    Repeated calls share one dict until the environment or a project config
    file changes. Callers must not mutate it.
    """
    normalized_root = _normalize_repo_root(repo_root)
    key = _cache_key(normalized_root)
    if key not in _config_cache:
        from .manager import ConfigManager

        _config_cache[key] = ConfigManager(normalized_root).load_config(validate=validate)
    return _config_cache[key]


def clear_all_caches() -> None:
    """Drop every cached configuration."""
    _config_cache.clear()


__all__ = ["get_cached_config", "clear_all_caches"]
