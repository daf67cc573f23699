from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_LOG_PATH: str | None = None
_VENDORKIT_HANDLERS: list[logging.Handler] = []


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def _drop_installed_handlers(root: logging.Logger) -> None:
    for h in _VENDORKIT_HANDLERS:
        root.removeHandler(h)
        h.close()
    _VENDORKIT_HANDLERS.clear()


def configure_stdlib_logging(
    *,
    log_path: Optional[Path],
    level: str = "INFO",
    verbose: bool = False,
) -> None:
    """Route stdlib logging to ``log_path`` and, with ``verbose``, to stderr.

    Only handlers installed here are replaced on a second call, so handlers
    added by an embedding application survive. Stdout is never written to,
    keeping ``--json`` output clean.

    Args:
        log_path: Log file; None disables file logging
        level: Level name for the file handler
        verbose: Also log DEBUG and above to stderr
    """
    global _CONFIGURED_LOG_PATH

    root = logging.getLogger()
    _drop_installed_handlers(root)

    file_level = _level_from_name(level)
    root_level = min(file_level, logging.DEBUG) if verbose else file_level
    root.setLevel(root_level)
    fmt = logging.Formatter(_FORMAT)

    resolved: str | None = None
    if log_path is not None:
        resolved = str(Path(log_path).resolve())
        Path(resolved).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(resolved, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
        _VENDORKIT_HANDLERS.append(fh)

    if verbose:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(logging.DEBUG)
        sh.setFormatter(fmt)
        root.addHandler(sh)
        _VENDORKIT_HANDLERS.append(sh)

    if not _VENDORKIT_HANDLERS:
        # Keeps logging's lastResort handler off stderr.
        nh = logging.NullHandler()
        root.addHandler(nh)
        _VENDORKIT_HANDLERS.append(nh)

    _CONFIGURED_LOG_PATH = resolved


def configured_log_path() -> str | None:
    return _CONFIGURED_LOG_PATH


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handlers installed by :func:`configure_stdlib_logging`."""
    global _CONFIGURED_LOG_PATH
    _drop_installed_handlers(logging.getLogger())
    _CONFIGURED_LOG_PATH = None


__all__ = ["configure_stdlib_logging", "configured_log_path", "reset_stdlib_logging_for_tests"]
