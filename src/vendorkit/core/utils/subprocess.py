"""Running external commands under the configured timeouts.

Commands never go through a shell. When output is captured, the child runs
in its own process group so a timeout kills every process it spawned
(``git clone`` starts helpers that would otherwise keep the pipes open).
"""
from __future__ import annotations

import logging
import os
import signal
import subprocess
from pathlib import Path
from time import perf_counter
from typing import Any, Mapping, Optional, Sequence

from vendorkit.core.config.domains.timeouts import TimeoutsConfig

logger = logging.getLogger(__name__)

_KILL_GRACE_SECONDS = 0.2


def configured_timeout(cmd: Sequence[str], timeout_type: str | None = None) -> float:
    """Return the timeout bucket for ``cmd`` in seconds.

    ``timeout_type`` is ``"git_operations"`` or ``"default"``; without it
    commands whose executable is named ``git`` use the git bucket.
    """
    if timeout_type is None:
        is_git = bool(cmd) and Path(str(cmd[0])).name == "git"
        timeout_type = "git_operations" if is_git else "default"
    timeouts = TimeoutsConfig()
    if timeout_type == "git_operations":
        return timeouts.git_operations_seconds
    return timeouts.default_seconds


def _new_session_kwargs() -> dict[str, Any]:
    if os.name == "posix":
        return {"start_new_session": True}
    flag = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", None)
    return {"creationflags": flag} if isinstance(flag, int) else {}


def _kill_group(proc: subprocess.Popen) -> None:
    if proc.poll() is not None:
        return
    if os.name != "posix":
        proc.kill()
        proc.wait(timeout=_KILL_GRACE_SECONDS)
        return
    for sig in (signal.SIGTERM, signal.SIGKILL):
        try:
            os.killpg(proc.pid, sig)
        except OSError:
            proc.kill()
        try:
            proc.wait(timeout=_KILL_GRACE_SECONDS)
            return
        except subprocess.TimeoutExpired:
            continue


def _run_captured(
    argv: list[str],
    *,
    timeout: float,
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    text: bool = True,
    check: bool = False,
) -> subprocess.CompletedProcess:
    proc = subprocess.Popen(
        argv,
        cwd=cwd,
        env=env,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=text,
        **_new_session_kwargs(),
    )
    try:
        stdout, stderr = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        _kill_group(proc)
        try:
            stdout, stderr = proc.communicate(timeout=_KILL_GRACE_SECONDS)
        except subprocess.TimeoutExpired:
            stdout = stderr = None
        raise subprocess.TimeoutExpired(argv, timeout, output=stdout, stderr=stderr) from None

    if check and proc.returncode != 0:
        raise subprocess.CalledProcessError(proc.returncode, argv, output=stdout, stderr=stderr)
    return subprocess.CompletedProcess(argv, proc.returncode, stdout=stdout, stderr=stderr)


def run_with_timeout(cmd: Sequence[str], timeout_type: str | None = None, **kwargs: Any) -> subprocess.CompletedProcess:
    """Run ``cmd`` with an explicit ``timeout=`` or the configured one.

    Keyword arguments are those of ``subprocess.run``. Captured runs
    (``capture_output=True``) accept ``cwd``, ``env``, ``text`` and ``check``.

    Raises:
        subprocess.TimeoutExpired: The command outlived its timeout.
    """
    argv = [str(part) for part in cmd]
    timeout = kwargs.pop("timeout", None)
    if timeout is None:
        timeout = configured_timeout(argv, timeout_type)
    if kwargs.get("cwd") is not None:
        kwargs["cwd"] = str(kwargs["cwd"])

    start = perf_counter()
    if kwargs.pop("capture_output", False):
        result = _run_captured(argv, timeout=float(timeout), **kwargs)
    else:
        result = subprocess.run(argv, timeout=timeout, **kwargs)
    logger.debug(
        "exit=%s in %.1fms (cwd=%s)",
        result.returncode,
        (perf_counter() - start) * 1000.0,
        kwargs.get("cwd") or ".",
    )
    return result


def run_git_command(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """Run a full git argv (binary included), capturing text output.

    ``timeout`` defaults to ``timeouts.git_operations_seconds``.
    """
    return run_with_timeout(
        cmd,
        timeout_type="git_operations",
        cwd=cwd,
        env=env,
        timeout=timeout,
        capture_output=True,
        text=True,
    )


__all__ = [
    "configured_timeout",
    "run_with_timeout",
    "run_git_command",
]
