"""Detect the Git hosting service of a local repository.

The service is detected from the URL of the repository's remote. The result
tells which service hosts it (GitHub, GitHub Enterprise, GitLab, Bitbucket or
an unknown host) along with the owner, repository name and current branch.

Example:
    >>> import detect_git_service
    >>> from detect_git_service import GitHub
    >>> service = detect_git_service.detect(".")
    >>> service.user, service.repo
    ('rhysd', 'detect_git_service')
    >>> isinstance(service, GitHub)
    True

    >>> # Classify a URL without touching the filesystem
    >>> detect_git_service.detect_url("git@gitlab.com:group/sub/project.git").full_name
    'sub/project'
"""

from detect_git_service.config.settings import DetectorSettings
from detect_git_service.enums import ServiceKind, UrlScheme
from detect_git_service.exceptions import ConfigurationError, DetectGitServiceError
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
from detect_git_service.service import (
    Bitbucket,
    GitHub,
    GitHubEnterprise,
    GitLab,
    GitService,
    HostedRepository,
    OtherService,
    ServiceDetector,
    classify,
    detect,
    service_from_dict,
)

detect_url = classify

__version__ = "0.1.0"

__all__ = [
    # Main API
    "detect",
    "detect_url",
    "classify",
    "service_from_dict",
    "ServiceDetector",
    "DetectorSettings",
    "RepositoryLocator",
    "GitRepositoryLocator",
    # Services
    "GitService",
    "HostedRepository",
    "GitHub",
    "GitHubEnterprise",
    "GitLab",
    "Bitbucket",
    "OtherService",
    "ServiceKind",
    "UrlScheme",
    # Exceptions
    "DetectGitServiceError",
    "ConfigurationError",
    "LocatorError",
    "NotGitRepositoryError",
    "NoRemotesError",
    "MultipleRemotesError",
    "ParseError",
    "UnrecognizedUrlError",
    "MissingPathComponentsError",
]
