"""Git repository access and remote URL parsing.

This package reads the remote URL and current branch of a local repository
and parses remote URLs into owner/repository path segments.

Example:
    >>> from detect_git_service.git import GitRepositoryLocator, GitUrlParser
    >>> url = GitRepositoryLocator().find_remote_url(".")
    >>> parser = GitUrlParser(url)
    >>> print(f"{parser.owner}/{parser.repo} @ {parser.host}")
    owner/repo @ github.com

Error Handling:
    Locator failures inherit from LocatorError, URL failures from ParseError.
    Both include helpful messages and hints for resolution.

    >>> from detect_git_service.git import GitRepositoryLocator, NoRemotesError
    >>> try:
    ...     GitRepositoryLocator().find_remote_url(".")
    ... except NoRemotesError as e:
    ...     print(e)
    No Git remotes configured in this repository

    Hint: Add a remote with: git remote add origin <url>
"""

from detect_git_service.git.exceptions import (
    LocatorError,
    MissingPathComponentsError,
    MultipleRemotesError,
    NoRemotesError,
    NotGitRepositoryError,
    ParseError,
    UnrecognizedUrlError,
)
from detect_git_service.git.locator import GitRepositoryLocator, RepositoryLocator
from detect_git_service.git.models import GitRemote, RemoteUrl
from detect_git_service.git.parser import GitUrlParser, normalize_url

__all__ = [
    # Locator
    "RepositoryLocator",
    "GitRepositoryLocator",
    # Parser
    "GitUrlParser",
    "normalize_url",
    # Models
    "GitRemote",
    "RemoteUrl",
    # Exceptions
    "LocatorError",
    "NotGitRepositoryError",
    "NoRemotesError",
    "MultipleRemotesError",
    "ParseError",
    "UnrecognizedUrlError",
    "MissingPathComponentsError",
]
