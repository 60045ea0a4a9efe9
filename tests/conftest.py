"""Pytest configuration and shared fixtures."""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from detect_git_service.git.exceptions import LocatorError


class FakeLocator:
    """In-memory RepositoryLocator for tests that need no repository on disk."""

    def __init__(
        self,
        url: str | None = None,
        branch: str | None = None,
        url_error: LocatorError | None = None,
        branch_error: LocatorError | None = None,
    ) -> None:
        self.url = url
        self.branch = branch
        self.url_error = url_error
        self.branch_error = branch_error
        self.calls: list[tuple[str, str]] = []

    def find_remote_url(self, path):
        self.calls.append(("find_remote_url", str(path)))
        if self.url_error is not None:
            raise self.url_error
        return self.url

    def current_branch(self, path):
        self.calls.append(("current_branch", str(path)))
        if self.branch_error is not None:
            raise self.branch_error
        return self.branch


@pytest.fixture
def fake_locator() -> type[FakeLocator]:
    """Factory fixture for creating fake locators."""
    return FakeLocator


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command in cwd and return its stripped stdout."""
    result = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Temporary Git repository on branch 'main' with one commit."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()

    run_git(repo_dir, "init")
    run_git(repo_dir, "symbolic-ref", "HEAD", "refs/heads/main")
    run_git(repo_dir, "config", "user.email", "test@example.com")
    run_git(repo_dir, "config", "user.name", "Test User")
    run_git(repo_dir, "config", "commit.gpgsign", "false")

    (repo_dir / "README.md").write_text("# Test Repository\n")
    run_git(repo_dir, "add", "README.md")
    run_git(repo_dir, "commit", "-m", "Initial commit")

    return repo_dir


@pytest.fixture
def git() -> Callable[..., str]:
    """The run_git helper, for tests that set up remotes and branches."""
    return run_git
