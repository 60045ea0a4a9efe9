"""Repository locator and URL parsing exceptions.

Locator errors (LocatorError) mean the remote URL could not be read from the
filesystem. Parse errors (ParseError) mean a remote URL was read but does not
describe an owner/repository pair on a host.

Example:
    >>> from detect_git_service.git.exceptions import NotGitRepositoryError
    >>> raise NotGitRepositoryError("/tmp/not-a-repo")
    Traceback (most recent call last):
        ...
    NotGitRepositoryError: Not a Git repository: /tmp/not-a-repo

    Hint: Run 'git init' or navigate to a Git repository directory.
"""

from typing import TYPE_CHECKING

from detect_git_service.exceptions import DetectGitServiceError

if TYPE_CHECKING:
    from detect_git_service.git.models import GitRemote


EXPECTED_URL_FORMATS = (
    "Expected formats:\n"
    "  - https://github.com/owner/repo.git\n"
    "  - ssh://git@github.com/owner/repo.git\n"
    "  - git://github.com/owner/repo.git\n"
    "  - git@github.com:owner/repo.git"
)


class LocatorError(DetectGitServiceError):
    """Base exception for failures reading repository metadata."""


class NotGitRepositoryError(LocatorError):
    """Raised when a path is not inside a Git repository.

    Attributes:
        path: Path that was searched
    """

    def __init__(self, path: str) -> None:
        """Initialize exception.

        Args:
            path: Path to the directory
        """
        super().__init__(
            message=f"Not a Git repository: {path}",
            hint="Run 'git init' or navigate to a Git repository directory.",
        )
        self.path = path


class NoRemotesError(LocatorError):
    """Raised when a repository has no usable remote.

    Subclasses describe other reasons for having no usable remote by
    overriding describe().

    Attributes:
        remote_name: Name of the requested remote, if a specific one was asked for
        available: Names of the remotes that do exist
    """

    def __init__(self, remote_name: str | None = None, available: list[str] | None = None) -> None:
        """Initialize exception.

        Args:
            remote_name: Remote that was requested but not found
            available: Names of the remotes that do exist
        """
        self.remote_name = remote_name
        self.available = list(available or [])
        message, hint = self.describe()
        super().__init__(message=message, hint=hint)

    def describe(self) -> tuple[str, str]:
        """Return the message and hint for this error."""
        if self.remote_name:
            names = ", ".join(self.available) or "none"
            return (
                f"Remote '{self.remote_name}' not found. Available: {names}",
                f"Add it with: git remote add {self.remote_name} <url>",
            )
        return (
            "No Git remotes configured in this repository",
            "Add a remote with: git remote add origin <url>",
        )


class MultipleRemotesError(NoRemotesError):
    """Raised when multiple remotes exist and none of them is preferred.

    Attributes:
        remotes: List of available remotes
    """

    def __init__(self, remotes: list["GitRemote"]) -> None:
        """Initialize exception.

        Args:
            remotes: List of available remotes
        """
        self.remotes = remotes
        super().__init__(available=[r.name for r in remotes])

    def describe(self) -> tuple[str, str]:
        remote_list = ", ".join(f"'{r.name}'" for r in self.remotes)
        return (
            f"Multiple remotes found and none is preferred: {remote_list}",
            "Set remote_name in the detector settings or rename one remote to 'origin'.",
        )


class ParseError(DetectGitServiceError):
    """Base exception for remote URLs that cannot be parsed.

    Attributes:
        url: The URL that failed to parse
    """

    def __init__(self, url: str, reason: str) -> None:
        """Initialize exception.

        Args:
            url: The URL that failed to parse
            reason: What was wrong with it
        """
        super().__init__(message=f"Git URL {url} is broken: {reason}", hint=EXPECTED_URL_FORMATS)
        self.url = url
        self.reason = reason


class UnrecognizedUrlError(ParseError):
    """Raised when a URL matches none of the supported scheme grammars."""

    def __init__(self, url: str, reason: str = "unrecognized URL form") -> None:
        super().__init__(url, reason)


class MissingPathComponentsError(ParseError):
    """Raised when a URL path does not contain both owner and repository.

    Attributes:
        segments: The usable path segments that were found
    """

    def __init__(self, url: str, segments: tuple[str, ...] = ()) -> None:
        shown = "/".join(segments) or "<empty>"
        super().__init__(url, f"path must contain owner/repo (got: {shown})")
        self.segments = segments
