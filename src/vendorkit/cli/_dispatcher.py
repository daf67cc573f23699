"""
Command-line entry point for vendorkit.

Command domains are the subpackages of :mod:`vendorkit.cli`; every public
module inside a domain is one command. ``vendorkit vendor add`` therefore
runs :func:`vendorkit.cli.vendor.add.main`.
"""
from __future__ import annotations

import argparse
import importlib
import logging
import pkgutil
import sys
from functools import lru_cache
from types import ModuleType

import vendorkit.cli as cli_package

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_domains() -> tuple[str, ...]:
    """Return the names of the command domain subpackages, sorted."""
    return tuple(
        sorted(
            info.name
            for info in pkgutil.iter_modules(cli_package.__path__)
            if info.ispkg and not info.name.startswith("_")
        )
    )


@lru_cache(maxsize=8)
def discover_commands(domain: str) -> dict[str, ModuleType]:
    """Import every command module of ``domain``.

    A module counts as a command when it defines ``main``. Modules that fail
    to import are reported on stderr and skipped so one broken command does
    not take the whole CLI down.
    """
    package = importlib.import_module(f"vendorkit.cli.{domain}")
    commands: dict[str, ModuleType] = {}
    for info in pkgutil.iter_modules(package.__path__):
        if info.ispkg or info.name.startswith("_"):
            continue
        try:
            module = importlib.import_module(f"{package.__name__}.{info.name}")
        except ImportError as e:
            print(f"Warning: could not load command {domain} {info.name}: {e}", file=sys.stderr)
            continue
        if callable(getattr(module, "main", None)):
            commands[info.name] = module
    return commands


def build_parser() -> argparse.ArgumentParser:
    from vendorkit import __version__

    parser = argparse.ArgumentParser(
        prog="vendorkit",
        description="Vendor dependencies as pinned git submodules or plain copies.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Also write debug logging to stderr",
    )

    domains = parser.add_subparsers(dest="domain", metavar="<domain>")
    for domain in discover_domains():
        commands = discover_commands(domain)
        if not commands:
            continue
        domain_parser = domains.add_parser(domain, help=f"{domain.title()} commands")
        domain_parser.set_defaults(_domain_parser=domain_parser)
        sub = domain_parser.add_subparsers(dest="command", metavar="<command>")
        for name, module in sorted(commands.items()):
            cmd_parser = sub.add_parser(
                name.replace("_", "-"),
                help=getattr(module, "SUMMARY", f"{domain} {name}"),
            )
            register = getattr(module, "register_args", None)
            if register is not None:
                register(cmd_parser)
            cmd_parser.set_defaults(_func=module.main)
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    from vendorkit.cli._utils import get_repo_root
    from vendorkit.core.audit import configure_stdlib_logging
    from vendorkit.core.config.domains.logging import LoggingConfig

    cfg = LoggingConfig(repo_root=get_repo_root(args))
    configure_stdlib_logging(
        log_path=cfg.log_path,
        level=cfg.level,
        verbose=bool(getattr(args, "verbose", False)),
    )


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv`` and run the selected command, returning its exit code."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    func = getattr(args, "_func", None)
    if func is None:
        getattr(args, "_domain_parser", parser).print_help()
        return 0

    from vendorkit.core.exceptions import VendorkitError

    try:
        _configure_logging(args)
    except (VendorkitError, OSError) as e:
        print(f"Error: could not configure logging: {e}", file=sys.stderr)
        return 1

    logger.debug("Running %s %s", args.domain, args.command)
    code = int(func(args) or 0)
    logger.debug("%s %s exited with %d", args.domain, args.command, code)
    return code


if __name__ == "__main__":
    sys.exit(main())
