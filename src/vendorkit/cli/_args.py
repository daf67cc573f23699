"""Arguments shared by several vendor commands."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Project whose vendors to manage (default: detected from the working directory)",
    )


def add_import_path_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "import_path",
        help="Vendor import path, relative to the vendor directory (e.g. github.com/org/lib)",
    )


__all__ = ["add_json_flag", "add_repo_root_flag", "add_import_path_arg"]
