"""Tests for the CLI logging setup."""
from __future__ import annotations

import logging
from pathlib import Path


def test_file_handler_writes_records(tmp_path: Path) -> None:
    from vendorkit.core.audit import configure_stdlib_logging, configured_log_path

    log_path = tmp_path / "logs" / "vendorkit.log"
    configure_stdlib_logging(log_path=log_path, level="INFO")

    logging.getLogger("vendorkit.test").info("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert configured_log_path() == str(log_path.resolve())
    assert "hello from test" in log_path.read_text(encoding="utf-8")


def test_reconfiguring_replaces_only_own_handlers(tmp_path: Path) -> None:
    from vendorkit.core.audit import configure_stdlib_logging

    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_stdlib_logging(log_path=tmp_path / "a.log")
        configure_stdlib_logging(log_path=tmp_path / "b.log")

        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert [Path(h.baseFilename).name for h in file_handlers] == ["b.log"]
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_verbose_logs_debug_to_stderr(tmp_path: Path, capsys) -> None:
    from vendorkit.core.audit import configure_stdlib_logging

    configure_stdlib_logging(log_path=None, level="WARNING", verbose=True)

    logging.getLogger("vendorkit.test").debug("debug detail")

    assert "debug detail" in capsys.readouterr().err


def test_reset_removes_handlers(tmp_path: Path) -> None:
    from vendorkit.core.audit import configure_stdlib_logging, configured_log_path, reset_stdlib_logging_for_tests

    configure_stdlib_logging(log_path=tmp_path / "x.log")
    reset_stdlib_logging_for_tests()

    assert configured_log_path() is None
    assert not [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
