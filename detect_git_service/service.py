"""Hosting service detection.

A detected service is one of a closed set of pydantic models, one per
ServiceKind, all carrying host, user, repo and branch. GitService is the
discriminated union of those models; the ``service`` field tells them apart,
so a dumped result validates back into the same class.

Host classification table (case-insensitive, first match wins):
    - settings.host_overrides (exact host)
    - github.com, *.github.com          -> GitHub
    - gitlab.com, *.gitlab.com          -> GitLab
    - bitbucket.org, *.bitbucket.org    -> Bitbucket
    - github.*                          -> GitHubEnterprise
    - gitlab.*                          -> GitLab (self-hosted)
    - anything else                     -> OtherService

Example:
    >>> from detect_git_service.service import classify
    >>> service = classify("https://github.com/rhysd/detect_git_service.git", "master")
    >>> type(service).__name__, service.user, service.repo, service.branch
    ('GitHub', 'rhysd', 'detect_git_service', 'master')
"""

from pathlib import Path
from typing import Annotated, Literal, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from detect_git_service.config.settings import DetectorSettings
from detect_git_service.enums import ServiceKind
from detect_git_service.git.exceptions import LocatorError
from detect_git_service.git.locator import GitRepositoryLocator, RepositoryLocator
from detect_git_service.git.parser import GitUrlParser

log = structlog.get_logger(__name__)


class HostedRepository(BaseModel):
    """Fields shared by every detected service.

    Attributes:
        host: Lower-cased hostname from the remote URL
        user: Repository owner/organization
        repo: Repository name (without .git suffix)
        branch: Checked-out branch, None on detached HEAD or when unknown
    """

    model_config = ConfigDict(frozen=True)

    host: str
    user: str
    repo: str
    branch: str | None = None

    @field_validator("user", "repo")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure user and repo are not empty.

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not v or not v.strip():
            raise ValueError("User and repo must not be empty")
        return v.strip()

    @property
    def kind(self) -> ServiceKind:
        """The service tag as a ServiceKind."""
        return ServiceKind(self.service)  # type: ignore[attr-defined]

    @property
    def full_name(self) -> str:
        """Return user/repo format."""
        return f"{self.user}/{self.repo}"


class GitHub(HostedRepository):
    """github.com"""

    service: Literal["github"] = "github"


class GitHubEnterprise(HostedRepository):
    """Self-hosted GitHub Enterprise Server (``github.<company>``)."""

    service: Literal["github-enterprise"] = "github-enterprise"


class GitLab(HostedRepository):
    """gitlab.com or a self-hosted GitLab instance."""

    service: Literal["gitlab"] = "gitlab"


class Bitbucket(HostedRepository):
    """bitbucket.org"""

    service: Literal["bitbucket"] = "bitbucket"


class OtherService(HostedRepository):
    """Host that matches no known service."""

    service: Literal["other"] = "other"


GitService = Annotated[
    Union[GitHub, GitHubEnterprise, GitLab, Bitbucket, OtherService],
    Field(discriminator="service"),
]

SERVICE_CLASSES: dict[ServiceKind, type[HostedRepository]] = {
    ServiceKind.GITHUB: GitHub,
    ServiceKind.GITHUB_ENTERPRISE: GitHubEnterprise,
    ServiceKind.GITLAB: GitLab,
    ServiceKind.BITBUCKET: Bitbucket,
    ServiceKind.OTHER: OtherService,
}

# (domain, kind): the domain itself or any subdomain of it
KNOWN_DOMAINS: tuple[tuple[str, ServiceKind], ...] = (
    ("github.com", ServiceKind.GITHUB),
    ("gitlab.com", ServiceKind.GITLAB),
    ("bitbucket.org", ServiceKind.BITBUCKET),
)

# (prefix, kind): self-hosted instances conventionally named after the product
KNOWN_PREFIXES: tuple[tuple[str, ServiceKind], ...] = (
    ("github.", ServiceKind.GITHUB_ENTERPRISE),
    ("gitlab.", ServiceKind.GITLAB),
)

_service_adapter: TypeAdapter[GitService] = TypeAdapter(GitService)


def service_kind_for_host(host: str, overrides: dict[str, ServiceKind] | None = None) -> ServiceKind:
    """Classify a hostname.

    Args:
        host: Hostname, any case, without port
        overrides: Exact hostnames (lower-case) mapped to a service

    Returns:
        The matching ServiceKind, ServiceKind.OTHER if nothing matches.
    """
    host = host.lower()

    if overrides and host in overrides:
        return overrides[host]

    for domain, kind in KNOWN_DOMAINS:
        if host == domain or host.endswith("." + domain):
            return kind

    for prefix, kind in KNOWN_PREFIXES:
        if host.startswith(prefix):
            return kind

    return ServiceKind.OTHER


def classify(url: str, branch: str | None = None, settings: DetectorSettings | None = None) -> GitService:
    """Detect the hosting service from a remote URL.

    Args:
        url: Remote URL in any supported form
        branch: Branch name attached to the result unchanged
        settings: Supplies host_overrides; defaults apply when omitted

    Returns:
        The GitService variant for the URL's host.

    Raises:
        UnrecognizedUrlError: If the URL form is not supported.
        MissingPathComponentsError: If the URL path lacks owner/repo.
    """
    parser = GitUrlParser(url)
    overrides = settings.host_overrides if settings else None
    kind = service_kind_for_host(parser.host, overrides)
    return SERVICE_CLASSES[kind](host=parser.host, user=parser.owner, repo=parser.repo, branch=branch)


def service_from_dict(data: dict) -> GitService:
    """Rebuild a GitService from ``model_dump()`` output.

    Raises:
        pydantic.ValidationError: If data is not a valid dumped service.
    """
    return _service_adapter.validate_python(data)


class ServiceDetector:
    """Detects the hosting service of the repository enclosing a path.

    Attributes:
        settings: Remote selection and host classification settings.
        locator: Source of remote URLs and branch names.

    Example:
        >>> detector = ServiceDetector(DetectorSettings(follow_upstream=True))
        >>> service = detector.detect("/path/to/repo/src")
        >>> service.full_name
        'owner/repo'
    """

    def __init__(
        self,
        settings: DetectorSettings | None = None,
        locator: RepositoryLocator | None = None,
    ) -> None:
        self.settings = settings or DetectorSettings()
        self.locator = locator if locator is not None else GitRepositoryLocator(self.settings)

    def detect(self, path: str | Path = ".") -> GitService:
        """Detect the service for the repository enclosing path.

        A branch that cannot be resolved is reported as None rather than
        failing detection.

        Raises:
            LocatorError: If no remote URL can be read (NotGitRepositoryError,
                NoRemotesError, MultipleRemotesError).
            ParseError: If the remote URL cannot be parsed.
        """
        url = self.locator.find_remote_url(path)

        try:
            branch = self.locator.current_branch(path)
        except LocatorError as e:
            log.warning("branch_unresolved", path=str(path), error=e.message)
            branch = None

        service = classify(url, branch, self.settings)
        log.debug(
            "service_detected",
            service=service.service,
            host=service.host,
            user=service.user,
            repo=service.repo,
            branch=branch,
        )
        return service

    def classify(self, url: str, branch: str | None = None) -> GitService:
        """Classify a URL using this detector's settings."""
        return classify(url, branch, self.settings)


def detect(
    path: str | Path = ".",
    locator: RepositoryLocator | None = None,
    settings: DetectorSettings | None = None,
) -> GitService:
    """Detect the hosting service for the repository enclosing path.

    Args:
        path: Any path inside a working tree (default: current directory)
        locator: Alternative source of remote URL and branch
        settings: Remote selection and host classification settings

    Returns:
        The detected GitService.

    Raises:
        LocatorError: If no remote URL can be read.
        ParseError: If the remote URL cannot be parsed.
    """
    return ServiceDetector(settings, locator).detect(path)
