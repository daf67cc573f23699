"""
vendorkit CLI package.

Commands are discovered from domain subfolders (``vendor/``); each command
module exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args)``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import add_import_path_arg, add_json_flag, add_repo_root_flag
from ._utils import get_repo_root, open_host_project, vendor_summary

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_import_path_arg",
    # Utilities
    "get_repo_root",
    "open_host_project",
    "vendor_summary",
]
