import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'vendorkit' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from vendorkit.core.git import GitService, set_git_service
from vendorkit.core.utils.paths import PROJECT_ROOT_ENV
from helpers.cache_utils import reset_vendorkit_caches
from helpers.env import TestGitRepo

# Local-path remotes are refused by `git submodule add` unless file transport is allowed.
TEST_GIT_EXTRA_CONFIG = ["protocol.file.allow=always"]


@pytest.fixture(autouse=True)
def _isolated_vendorkit_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point config, git and caches at the test's tmp_path.

    - VENDORKIT_* overrides from the developer shell are cleared
    - git ignores global/system config and never searches above tmp_path
    - the process-wide git adapter allows local file remotes
    """
    for key in list(os.environ):
        if key.startswith("VENDORKIT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path))

    global_gitconfig = tmp_path / ".gitconfig-test"
    global_gitconfig.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")

    reset_vendorkit_caches()
    previous = set_git_service(GitService(extra_config=TEST_GIT_EXTRA_CONFIG))
    yield
    set_git_service(previous)
    reset_vendorkit_caches()


@pytest.fixture
def make_git_repo(tmp_path: Path):
    """Factory creating initialized repositories under tmp_path by name."""

    def _make(name: str, **kwargs) -> TestGitRepo:
        return TestGitRepo(tmp_path / name, **kwargs)

    return _make


@pytest.fixture
def git_repo(make_git_repo) -> TestGitRepo:
    """Host repository with one commit on ``main``."""
    return make_git_repo("host")


@pytest.fixture
def upstream_repo(make_git_repo) -> TestGitRepo:
    """Repository acting as the remote of vendored dependencies."""
    repo = make_git_repo("upstream")
    repo.commit_file("lib.py", "VALUE = 1\n", "Add lib")
    return repo
