"""Enumerations for hosting services and remote URL schemes."""

from enum import Enum


class ServiceKind(str, Enum):
    """Hosting services a remote URL can be classified as.

    OTHER is the fallback for hosts that match no known service.
    """

    GITHUB = "github"
    GITHUB_ENTERPRISE = "github-enterprise"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class UrlScheme(str, Enum):
    """Syntactic form of a remote URL.

    SCP is the scheme-less ``user@host:owner/repo`` shorthand.
    """

    HTTPS = "https"
    SSH = "ssh"
    GIT = "git"
    SCP = "scp"

    def __str__(self) -> str:
        return self.value
