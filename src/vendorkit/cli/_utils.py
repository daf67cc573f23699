"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from vendorkit.core.projects import LocalProject, open_project
from vendorkit.core.utils.paths import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get repository root from args or auto-detect.

    Args:
        args: Parsed arguments with optional repo_root attribute

    Returns:
        Path: Repository root path
    """
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return resolve_project_root()


def open_host_project(args: argparse.Namespace) -> LocalProject:
    """Open the project vendors are managed in."""
    return open_project(get_repo_root(args))


def vendor_summary(import_path: str, project: LocalProject) -> dict:
    """JSON-friendly description of one vendor."""
    from vendorkit.core.projects import GitProject

    entry = {
        "import_path": import_path,
        "kind": "git" if isinstance(project, GitProject) else "plain",
        "path": str(project.get_base_dir()),
    }
    if isinstance(project, GitProject):
        entry["reference"] = project.get_reference()
    return entry


__all__ = ["get_repo_root", "open_host_project", "vendor_summary"]
