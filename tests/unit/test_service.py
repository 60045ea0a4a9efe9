"""Unit tests for hosting service detection.

Tests cover:
- Host classification table and overrides
- classify() on every URL form
- GitService models (validation, immutability, discriminated union)
- detect() orchestration with a fake locator
"""

import pytest
from pydantic import ValidationError

import detect_git_service
from detect_git_service.config.settings import DetectorSettings
from detect_git_service.enums import ServiceKind
from detect_git_service.exceptions import DetectGitServiceError
from detect_git_service.git.exceptions import (
    MissingPathComponentsError,
    NoRemotesError,
    NotGitRepositoryError,
    UnrecognizedUrlError,
)
from detect_git_service.git.locator import GitRepositoryLocator
from detect_git_service.service import (
    Bitbucket,
    GitHub,
    GitHubEnterprise,
    GitLab,
    OtherService,
    ServiceDetector,
    classify,
    detect,
    service_from_dict,
    service_kind_for_host,
)


class TestServiceKindForHost:
    """Tests for the host classification table."""

    @pytest.mark.parametrize(
        ("host", "expected"),
        [
            ("github.com", ServiceKind.GITHUB),
            ("GitHub.com", ServiceKind.GITHUB),
            ("ssh.github.com", ServiceKind.GITHUB),
            ("gitlab.com", ServiceKind.GITLAB),
            ("altssh.gitlab.com", ServiceKind.GITLAB),
            ("bitbucket.org", ServiceKind.BITBUCKET),
            ("github.company.com", ServiceKind.GITHUB_ENTERPRISE),
            ("gitlab.company.com", ServiceKind.GITLAB),
            ("example.com", ServiceKind.OTHER),
            ("codeberg.org", ServiceKind.OTHER),
            ("notgithub.com", ServiceKind.OTHER),
            ("github.com.evil.example", ServiceKind.GITHUB_ENTERPRISE),
        ],
    )
    def test_builtin_table(self, host: str, expected: ServiceKind) -> None:
        """Test the built-in host patterns."""
        assert service_kind_for_host(host) is expected

    def test_override_wins(self) -> None:
        """Test that exact overrides are checked first."""
        overrides = {"git.corp.example": ServiceKind.GITHUB_ENTERPRISE, "github.com": ServiceKind.OTHER}

        assert service_kind_for_host("Git.Corp.Example", overrides) is ServiceKind.GITHUB_ENTERPRISE
        assert service_kind_for_host("github.com", overrides) is ServiceKind.OTHER
        assert service_kind_for_host("gitlab.com", overrides) is ServiceKind.GITLAB


class TestClassify:
    """Tests for classify() on remote URLs."""

    def test_github_https_with_branch(self) -> None:
        """Test the canonical GitHub HTTPS example."""
        service = classify("https://github.com/rhysd/detect_git_service.git", "master")

        assert isinstance(service, GitHub)
        assert service.kind is ServiceKind.GITHUB
        assert service.user == "rhysd"
        assert service.repo == "detect_git_service"
        assert service.branch == "master"
        assert service.host == "github.com"

    def test_gitlab_subgroups(self) -> None:
        """Test that nested GitLab groups report the innermost group."""
        service = classify("git@gitlab.com:group/sub/project.git")

        assert isinstance(service, GitLab)
        assert service.user == "sub"
        assert service.repo == "project"
        assert service.branch is None

    def test_unknown_host_fallback(self) -> None:
        """Test the generic fallback for unknown hosts."""
        service = classify("https://example.com/owner/name")

        assert isinstance(service, OtherService)
        assert service.kind is ServiceKind.OTHER
        assert service.host == "example.com"
        assert service.user == "owner"
        assert service.repo == "name"

    def test_bitbucket(self) -> None:
        """Test Bitbucket detection."""
        service = classify("git@bitbucket.org:team/project.git", "develop")

        assert isinstance(service, Bitbucket)
        assert service.full_name == "team/project"

    def test_github_enterprise(self) -> None:
        """Test GitHub Enterprise detection from a github.* host."""
        service = classify("https://github.mycompany.com/team/app.git")

        assert isinstance(service, GitHubEnterprise)
        assert service.host == "github.mycompany.com"

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/owner/repo.git",
            "https://github.com/owner/repo",
            "http://github.com/owner/repo/",
            "git@github.com:owner/repo.git",
            "ssh://git@github.com/owner/repo.git",
            "ssh://git@ssh.github.com:443/owner/repo.git",
            "git://github.com/owner/repo.git",
        ],
    )
    def test_all_forms_agree(self, url: str) -> None:
        """Test that every URL form of one remote classifies identically."""
        service = classify(url, "main")

        assert service == GitHub(host=service.host, user="owner", repo="repo", branch="main")

    def test_branch_attached_verbatim(self) -> None:
        """Test that the branch is not validated or altered."""
        service = classify("https://github.com/owner/repo", "  weird branch  ")

        assert service.branch == "  weird branch  "

    def test_host_overrides_from_settings(self) -> None:
        """Test that settings reclassify a host."""
        settings = DetectorSettings(host_overrides={"git.corp.example": "gitlab"})

        service = classify("git@git.corp.example:team/app.git", settings=settings)

        assert isinstance(service, GitLab)

    def test_unrecognized_form(self) -> None:
        """Test that unsupported schemes fail."""
        with pytest.raises(UnrecognizedUrlError):
            classify("ftp://host/user/repo")

    def test_missing_path_components(self) -> None:
        """Test that a single path segment fails."""
        with pytest.raises(MissingPathComponentsError):
            classify("https://host/repo")

    def test_blank_owner_raises_package_error(self) -> None:
        """Test that a whitespace owner fails with a package error, not a validation error."""
        with pytest.raises(DetectGitServiceError):
            classify("https://example.com/ /repo")

    def test_detect_url_alias(self) -> None:
        """Test that the package exports classify as detect_url."""
        assert detect_git_service.detect_url is classify


class TestGitServiceModels:
    """Tests for the GitService pydantic models."""

    def test_frozen(self) -> None:
        """Test that results are immutable."""
        service = GitHub(host="github.com", user="owner", repo="repo")

        with pytest.raises(ValidationError):
            service.user = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["user", "repo"])
    def test_user_and_repo_not_empty(self, field: str) -> None:
        """Test that empty user or repo is rejected."""
        values = {"host": "github.com", "user": "owner", "repo": "repo", field: "  "}

        with pytest.raises(ValidationError):
            GitHub(**values)

    def test_round_trip_through_dump(self) -> None:
        """Test that a dumped service validates back into the same variant."""
        service = classify("https://github.mycompany.com/team/app.git", "main")

        assert service_from_dict(service.model_dump()) == service
        assert service_from_dict(service.model_dump(mode="json")) == service

    def test_unknown_service_tag_rejected(self) -> None:
        """Test that the discriminator is closed."""
        with pytest.raises(ValidationError):
            service_from_dict({"service": "sourceforge", "host": "h", "user": "u", "repo": "r"})

    def test_every_kind_has_a_model(self) -> None:
        """Test that each ServiceKind maps to a model carrying that tag."""
        for kind in ServiceKind:
            service = service_from_dict({"service": kind.value, "host": "h", "user": "u", "repo": "r"})
            assert service.kind is kind


class TestServiceDetector:
    """Tests for detect() orchestration with a fake locator."""

    def test_detect_uses_locator(self, fake_locator) -> None:
        """Test the full path -> url -> service flow."""
        locator = fake_locator(url="https://github.com/rhysd/detect_git_service.git", branch="master")

        service = detect("/work/repo/src", locator=locator)

        assert isinstance(service, GitHub)
        assert service.full_name == "rhysd/detect_git_service"
        assert service.branch == "master"
        assert locator.calls == [
            ("find_remote_url", "/work/repo/src"),
            ("current_branch", "/work/repo/src"),
        ]

    def test_detached_head(self, fake_locator) -> None:
        """Test that a missing branch yields None."""
        locator = fake_locator(url="git@gitlab.com:group/project.git", branch=None)

        service = detect(".", locator=locator)

        assert service.branch is None

    def test_branch_failure_degrades_to_none(self, fake_locator) -> None:
        """Test that branch resolution errors never fail detection."""
        locator = fake_locator(
            url="https://example.com/owner/name",
            branch_error=NotGitRepositoryError("/work"),
        )

        service = detect("/work", locator=locator)

        assert isinstance(service, OtherService)
        assert service.branch is None

    def test_locator_error_propagates(self, fake_locator) -> None:
        """Test that remote lookup errors are raised unchanged."""
        error = NoRemotesError()
        locator = fake_locator(url_error=error)

        with pytest.raises(NoRemotesError) as exc_info:
            detect("/work", locator=locator)

        assert exc_info.value is error
        # Branch is not consulted when no remote is found
        assert locator.calls == [("find_remote_url", "/work")]

    def test_parse_error_propagates(self, fake_locator) -> None:
        """Test that unparseable remote URLs are raised."""
        locator = fake_locator(url="/srv/git/repo.git", branch="main")

        with pytest.raises(UnrecognizedUrlError):
            detect("/work", locator=locator)

    def test_detector_settings_applied(self, fake_locator) -> None:
        """Test that the detector passes host overrides to classification."""
        settings = DetectorSettings(host_overrides={"git.corp.example": ServiceKind.GITHUB_ENTERPRISE})
        detector = ServiceDetector(settings, fake_locator(url="https://git.corp.example/team/app"))

        assert isinstance(detector.detect(), GitHubEnterprise)
        assert isinstance(detector.classify("https://git.corp.example/team/app"), GitHubEnterprise)

    def test_default_locator(self) -> None:
        """Test that the GitPython locator is used by default with the same settings."""
        settings = DetectorSettings(remote_name="fork")
        detector = ServiceDetector(settings)

        assert isinstance(detector.locator, GitRepositoryLocator)
        assert detector.locator.settings is settings
