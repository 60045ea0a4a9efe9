"""Git remote data models.

This module defines the immutable values produced while reading a repository:
the configured remotes and the parsed form of a remote URL.

Example:
    >>> from detect_git_service.git.models import RemoteUrl
    >>> from detect_git_service.enums import UrlScheme
    >>> remote = RemoteUrl(
    ...     url="git@gitlab.com:group/sub/project.git",
    ...     scheme=UrlScheme.SCP,
    ...     host="gitlab.com",
    ...     path_segments=("group", "sub", "project"),
    ... )
    >>> remote.owner, remote.repo, remote.namespace
    ('sub', 'project', 'group/sub')
"""

from dataclasses import dataclass

from detect_git_service.enums import UrlScheme


@dataclass(frozen=True)
class GitRemote:
    """Represents a Git remote configuration.

    Attributes:
        name: Remote name (e.g., 'origin', 'upstream')
        url: Raw URL from git config
    """

    name: str
    url: str


@dataclass(frozen=True)
class RemoteUrl:
    """A remote URL split into scheme, host and path segments.

    Attributes:
        url: Original URL with surrounding whitespace removed
        scheme: Detected syntactic form
        host: Lower-cased hostname, without user or port
        path_segments: Non-empty path segments, ``.git`` suffix removed
        port: Explicit port, if the URL carried one
    """

    url: str
    scheme: UrlScheme
    host: str
    path_segments: tuple[str, ...]
    port: int | None = None

    def __post_init__(self) -> None:
        if len(self.path_segments) < 2:
            raise ValueError("RemoteUrl needs at least owner and repo path segments")

    @property
    def owner(self) -> str:
        """Second-to-last path segment.

        For nested GitLab groups (``group/sub/project``) this is the innermost
        group; the full group path is available as ``namespace``.
        """
        return self.path_segments[-2]

    @property
    def repo(self) -> str:
        """Last path segment."""
        return self.path_segments[-1]

    @property
    def namespace(self) -> str:
        """Every segment before the repository name, joined with ``/``."""
        return "/".join(self.path_segments[:-1])
