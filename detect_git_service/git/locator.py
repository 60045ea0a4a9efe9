"""Reading remote URLs and branches from local repositories.

The detector depends only on the RepositoryLocator protocol, so URL
classification can be tested with a fake locator and no repository on disk.
GitRepositoryLocator is the default implementation, backed by GitPython.

Remote selection (GitRepositoryLocator.select_remote):
    1. settings.remote_name, if set
    2. the remote tracked by the current branch, if settings.follow_upstream
    3. the only remote, if there is exactly one
    4. the first of settings.preferred_remotes that exists
    5. otherwise MultipleRemotesError

Example:
    >>> from detect_git_service.git.locator import GitRepositoryLocator
    >>> locator = GitRepositoryLocator()
    >>> locator.find_remote_url("src/module")
    'git@github.com:owner/repo.git'
    >>> locator.current_branch("src/module")
    'main'

Dependencies:
    Requires GitPython (gitpython) package for repository access.
"""

from pathlib import Path
from typing import Protocol

import git
import structlog
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from detect_git_service.config.settings import DetectorSettings
from detect_git_service.git.exceptions import MultipleRemotesError, NoRemotesError, NotGitRepositoryError
from detect_git_service.git.models import GitRemote

log = structlog.get_logger(__name__)


class RepositoryLocator(Protocol):
    """Read-only access to the repository enclosing a path."""

    def find_remote_url(self, path: str | Path) -> str:
        """Return the URL of the selected remote.

        Raises:
            NotGitRepositoryError: If path is not inside a repository.
            NoRemotesError: If no usable remote is configured.
        """
        ...

    def current_branch(self, path: str | Path) -> str | None:
        """Return the checked-out branch name, or None on detached HEAD."""
        ...


class GitRepositoryLocator:
    """RepositoryLocator backed by GitPython.

    Each call opens the repository, reads what it needs and closes it again;
    nothing is cached between calls.

    Attributes:
        settings: Remote selection settings.
    """

    def __init__(self, settings: DetectorSettings | None = None) -> None:
        self.settings = settings or DetectorSettings()

    def _open_repo(self, path: str | Path) -> git.Repo:
        """Open the repository enclosing path, searching parent directories.

        Raises:
            NotGitRepositoryError: If the path is not within a Git repository.
        """
        repo_path = Path(path).resolve()
        try:
            return git.Repo(repo_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotGitRepositoryError(str(repo_path)) from e

    @staticmethod
    def _remotes(repo: git.Repo) -> list[GitRemote]:
        remotes = []
        for remote in repo.remotes:
            # GitPython raises AttributeError for a remote section without url
            url = getattr(remote, "url", None)
            if not url:
                log.debug("remote_without_url", remote=remote.name)
                continue
            remotes.append(GitRemote(name=remote.name, url=url))
        return remotes

    @staticmethod
    def _upstream_remote_name(repo: git.Repo) -> str | None:
        try:
            tracking = repo.active_branch.tracking_branch()
        except TypeError:
            # Detached HEAD has no branch to track anything
            return None
        return tracking.remote_name if tracking is not None else None

    def list_remotes(self, path: str | Path = ".") -> list[GitRemote]:
        """List all configured remotes that have a URL.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        repo = self._open_repo(path)
        try:
            return self._remotes(repo)
        finally:
            repo.close()

    def select_remote(self, path: str | Path = ".") -> GitRemote:
        """Pick the remote whose URL identifies the hosting service.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            NoRemotesError: If there are no remotes, or the configured
                remote_name does not exist.
            MultipleRemotesError: If several remotes exist and none is preferred.
        """
        repo = self._open_repo(path)
        try:
            remotes = self._remotes(repo)
            upstream = self._upstream_remote_name(repo) if self.settings.follow_upstream else None
        finally:
            repo.close()

        if not remotes:
            raise NoRemotesError()

        by_name = {remote.name: remote for remote in remotes}

        if self.settings.remote_name:
            if self.settings.remote_name not in by_name:
                raise NoRemotesError(self.settings.remote_name, list(by_name))
            return by_name[self.settings.remote_name]

        if upstream and upstream in by_name:
            return by_name[upstream]

        if len(remotes) == 1:
            return remotes[0]

        for preferred in self.settings.preferred_remotes:
            if preferred in by_name:
                return by_name[preferred]

        raise MultipleRemotesError(remotes)

    def find_remote_url(self, path: str | Path = ".") -> str:
        remote = self.select_remote(path)
        log.debug("remote_selected", remote=remote.name, url=remote.url)
        return remote.url

    def current_branch(self, path: str | Path = ".") -> str | None:
        repo = self._open_repo(path)
        try:
            return repo.active_branch.name
        except TypeError:
            log.debug("detached_head", path=str(path))
            return None
        finally:
            repo.close()
