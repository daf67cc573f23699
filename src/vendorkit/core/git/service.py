"""Git adapter.

Maps the logical operations the vendoring engine needs (clone, submodule
add/remove, checkout, remote and root discovery, ...) onto ``git``
invocations. This is the only module that shells out to git.

Every invocation produces a :class:`CommandResult`; operations either
return parsed output or raise a :class:`~vendorkit.core.git.exceptions.GitError`
subclass carrying the operation, working directory and argv as context.
"""
from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Optional, Sequence

from vendorkit.core.git.exceptions import GitCommandError, NoRemoteError, NotAGitRepositoryError
from vendorkit.core.git.redaction import redact_git_args, redact_text_credentials
from vendorkit.core.git.remote import parse_remote_records, select_fetch_uri
from vendorkit.core.utils.fs import remove_tree
from vendorkit.core.utils.subprocess import run_git_command

logger = logging.getLogger(__name__)

_NOT_A_REPOSITORY_MARKER = "not a git repository"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one git invocation.

    Attributes:
        args: Full argv, git binary included
        cwd: Working directory the command ran in (None for the process cwd)
        returncode: Process exit status
        stdout: Captured standard output
        stderr: Captured standard error
    """

    args: tuple[str, ...]
    cwd: Optional[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def check(self, operation: str) -> CommandResult:
        """Return ``self`` on success, raise :class:`GitCommandError` otherwise."""
        if self.ok:
            return self
        detail = redact_text_credentials((self.stderr or self.stdout).strip())
        raise GitCommandError(
            f"git {operation} failed in {self.cwd or '.'} (exit {self.returncode}): {detail}",
            context={
                "operation": operation,
                "cwd": self.cwd,
                "argv": redact_git_args(self.args),
                "returncode": self.returncode,
                "stderr": redact_text_credentials(self.stderr),
            },
        )


class GitService:
    """Typed facade over the git command line.

    Settings left as None are read from configuration (``git.*`` and
    ``vendors.preferred_remote``) on first use.
    """

    def __init__(
        self,
        *,
        binary: Optional[str] = None,
        extra_config: Optional[Sequence[str]] = None,
        preferred_remote: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._binary = binary
        self._extra_config = list(extra_config) if extra_config is not None else None
        self._preferred_remote = preferred_remote
        self.timeout = timeout

    @cached_property
    def binary(self) -> str:
        if self._binary:
            return self._binary
        from vendorkit.core.config.domains.git import GitConfig

        return GitConfig().binary

    @cached_property
    def extra_config(self) -> list[str]:
        if self._extra_config is not None:
            return self._extra_config
        from vendorkit.core.config.domains.git import GitConfig

        return GitConfig().extra_config

    @cached_property
    def preferred_remote(self) -> Optional[str]:
        if self._preferred_remote is not None:
            return self._preferred_remote
        from vendorkit.core.config.domains.vendors import VendorsConfig

        return VendorsConfig().preferred_remote

    def run(self, cwd: Optional[Path | str], *args: str) -> CommandResult:
        """Run ``git <args>`` in ``cwd`` and capture its output."""
        argv: list[str] = [self.binary]
        for item in self.extra_config:
            argv.extend(["-c", item])
        argv.extend(args)
        cwd_str = str(cwd) if cwd is not None else None

        logger.debug("git %s (cwd=%s)", " ".join(redact_git_args(args)), cwd_str or ".")
        try:
            completed = run_git_command(argv, cwd=cwd_str, timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            raise GitCommandError(
                f"git {args[0] if args else ''} timed out after {exc.timeout}s in {cwd_str or '.'}",
                context={"cwd": cwd_str, "argv": redact_git_args(argv), "timeout": exc.timeout},
            ) from exc
        except OSError as exc:
            raise GitCommandError(
                f"Could not run git in {cwd_str or '.'}: {exc}",
                context={"cwd": cwd_str, "argv": redact_git_args(argv)},
            ) from exc

        return CommandResult(
            args=tuple(argv),
            cwd=cwd_str,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    # ---------- repository setup ----------

    def clone(self, target_path: Path | str, remote_uri: str) -> None:
        target = Path(target_path).absolute()
        target.parent.mkdir(parents=True, exist_ok=True)
        self.run(None, "clone", "--", remote_uri, str(target)).check("clone")

    def init_repo(self, repo_dir: Path | str) -> None:
        self.run(repo_dir, "init").check("init")

    def init_submodules(self, repo_dir: Path | str) -> None:
        self.run(repo_dir, "submodule", "init").check("submodule init")

    def update_submodules(self, repo_dir: Path | str) -> None:
        self.run(repo_dir, "submodule", "update").check("submodule update")

    # ---------- submodules ----------

    def add_submodule(self, repo_dir: Path | str, remote_uri: str, target_path: str) -> None:
        """Register ``remote_uri`` as a submodule at ``target_path`` (relative to ``repo_dir``)."""
        self.run(repo_dir, "submodule", "add", "-f", "--", remote_uri, target_path).check("submodule add")

    def remove_submodule(self, repo_dir: Path | str, target_path: str) -> None:
        """Deinit, untrack and drop the metadata of the submodule at ``target_path``.

        The first failing step raises; later steps are skipped.
        """
        self.run(repo_dir, "submodule", "deinit", "-f", "--", target_path).check("submodule deinit")
        self.run(repo_dir, "rm", "-rf", "--", target_path).check("rm")

        modules_dir = Path(repo_dir) / ".git" / "modules" / target_path
        try:
            remove_tree(modules_dir)
        except OSError as exc:
            raise GitCommandError(
                f"Could not remove submodule metadata {modules_dir}: {exc}",
                context={"operation": "remove submodule metadata", "cwd": str(repo_dir)},
            ) from exc

    def checkout(self, repo_dir: Path | str, reference: str) -> None:
        # Trailing "--" keeps git from reading the reference as a pathspec.
        self.run(repo_dir, "checkout", "-q", reference, "--").check("checkout")

    # ---------- queries ----------

    def get_remote_uri(self, repo_dir: Path | str) -> str:
        """Return the fetch URI of the repository at ``repo_dir``.

        Raises:
            NoRemoteError: The repository has no remote configured.
            GitCommandError: git failed, or its output holds no fetch record.
        """
        result = self.run(repo_dir, "remote", "-v").check("remote -v")
        if not result.stdout.strip("\n"):
            raise NoRemoteError(f"No remote found for {repo_dir}", context={"cwd": str(repo_dir)})

        uri = select_fetch_uri(parse_remote_records(result.stdout), self.preferred_remote)
        if uri is None:
            raise GitCommandError(
                f"Could not extract remote URL from {repo_dir}",
                context={"operation": "remote -v", "cwd": str(repo_dir)},
            )
        return uri

    def get_current_revision(self, repo_dir: Path | str) -> str:
        result = self.run(repo_dir, "rev-parse", "--verify", "HEAD").check("rev-parse HEAD")
        return result.stdout.strip()

    def get_root_dir(self, directory: Path | str) -> Path:
        """Return the top-level directory of the repository containing ``directory``.

        Raises:
            NotAGitRepositoryError: ``directory`` is missing or not inside a repository.
        """
        if not Path(directory).is_dir():
            raise NotAGitRepositoryError(
                f"Not a git repository: {directory}", context={"cwd": str(directory)}
            )
        result = self.run(directory, "rev-parse", "--show-toplevel")
        if not result.ok and _NOT_A_REPOSITORY_MARKER in result.stderr.lower():
            raise NotAGitRepositoryError(
                f"Not a git repository: {directory}", context={"cwd": str(directory)}
            )
        result.check("rev-parse --show-toplevel")
        return Path(result.stdout.strip())


__all__ = ["CommandResult", "GitService"]
