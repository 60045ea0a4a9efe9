"""Exception hierarchy for detect-git-service.

Every error raised by this package derives from DetectGitServiceError, so
callers can surface any failure with a single except clause. Errors carry a
message and an optional hint describing how to resolve the problem.

Exception Hierarchy:
    DetectGitServiceError (base)
    ├── ConfigurationError
    ├── LocatorError
    │   ├── NotGitRepositoryError
    │   └── NoRemotesError
    │       └── MultipleRemotesError
    └── ParseError
        ├── UnrecognizedUrlError
        └── MissingPathComponentsError

The locator and parse errors live in detect_git_service.git.exceptions.

Example Usage:
    >>> from detect_git_service.exceptions import ConfigurationError
    >>> try:
    ...     settings = DetectorSettings.from_yaml(path)
    ... except ConfigurationError as e:
    ...     print(e.message)
"""


class DetectGitServiceError(Exception):
    """Base exception for all detect-git-service errors.

    Attributes:
        message: Human-readable error description
        hint: Optional hint for resolution
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            hint: Optional hint for resolution
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Format error message with hint.

        Returns:
            Formatted error message with optional hint
        """
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class ConfigurationError(DetectGitServiceError):
    """Configuration-related errors.

    Raised when a settings file is missing, is not valid YAML, or contains
    fields that fail validation.
    """

    pass
