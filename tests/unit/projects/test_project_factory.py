"""Tests for opening projects from paths and command-line sources."""
from __future__ import annotations

from pathlib import Path

import pytest

from helpers.git_stub import StubGitService


class TestOpenProject:
    def test_repository_root_opens_as_git_project(self, tmp_path: Path) -> None:
        from vendorkit.core.projects import GitProject, open_project

        (tmp_path / "repo" / ".git").mkdir(parents=True)

        project = open_project(tmp_path / "repo", git=StubGitService())

        assert isinstance(project, GitProject)

    def test_directory_without_git_opens_as_plain(self, tmp_path: Path) -> None:
        from vendorkit.core.projects import GitProject, PlainProject, open_project

        (tmp_path / "lib").mkdir()

        project = open_project(tmp_path / "lib", git=StubGitService())

        assert isinstance(project, PlainProject)
        assert not isinstance(project, GitProject)

    def test_subdirectory_of_repository_opens_as_plain(self, tmp_path: Path) -> None:
        """Only a repository root is a GitProject; a folder inside one is plain."""
        from vendorkit.core.projects import GitProject, open_project

        (tmp_path / "repo" / ".git").mkdir(parents=True)
        (tmp_path / "repo" / "pkg").mkdir()

        project = open_project(tmp_path / "repo" / "pkg", git=StubGitService())

        assert not isinstance(project, GitProject)


class TestProjectFromSource:
    @pytest.mark.parametrize(
        "uri",
        [
            "https://example.com/org/lib.git",
            "ssh://git@example.com/org/lib.git",
            "file:///srv/git/lib.git",
            "git@example.com:org/lib.git",
        ],
    )
    def test_uris_become_remote_projects(self, uri: str) -> None:
        from vendorkit.core.projects import RemoteGitProject, project_from_source

        project = project_from_source(uri)

        assert isinstance(project, RemoteGitProject)
        assert project.get_git_uri() == uri

    def test_existing_directory_is_opened(self, tmp_path: Path) -> None:
        from vendorkit.core.projects import PlainProject, project_from_source

        (tmp_path / "lib").mkdir()

        project = project_from_source(str(tmp_path / "lib"))

        assert isinstance(project, PlainProject)
        assert project.get_base_dir() == (tmp_path / "lib").resolve()

    def test_missing_path_is_an_error(self, tmp_path: Path) -> None:
        from vendorkit.core.projects import project_from_source

        with pytest.raises(FileNotFoundError):
            project_from_source(str(tmp_path / "missing"))
