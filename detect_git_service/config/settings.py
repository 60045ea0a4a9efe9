"""
Detector settings using Pydantic for validated configuration.

Settings are built in code or loaded from a YAML file. They are never read
from environment variables.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from detect_git_service.enums import ServiceKind
from detect_git_service.exceptions import ConfigurationError


class DetectorSettings(BaseModel):
    """How remotes are selected and hosts are classified.

    Example YAML:

        remote_name: null
        preferred_remotes: [origin, upstream]
        follow_upstream: true
        host_overrides:
          git.corp.example.com: github-enterprise
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    remote_name: str | None = Field(default=None, description="Always use this remote when set")
    preferred_remotes: list[str] = Field(
        default_factory=lambda: ["origin", "upstream"],
        description="Remote names tried in order when several remotes exist",
    )
    follow_upstream: bool = Field(
        default=False,
        description="Prefer the remote tracked by the current branch's upstream",
    )
    host_overrides: dict[str, ServiceKind] = Field(
        default_factory=dict,
        description="Exact hostnames mapped to a service, checked before the built-in table",
    )

    @field_validator("preferred_remotes")
    @classmethod
    def validate_remote_names(cls, v: list[str]) -> list[str]:
        """Ensure preferred remote names are not blank."""
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("Preferred remote names must not be empty")
        return names

    @field_validator("host_overrides")
    @classmethod
    def normalize_hosts(cls, v: dict[str, ServiceKind]) -> dict[str, ServiceKind]:
        """Lower-case hostnames so lookups are case-insensitive."""
        return {host.strip().lower(): kind for host, kind in v.items()}

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> DetectorSettings:
        """Load settings from a YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            DetectorSettings instance

        Raises:
            ConfigurationError: If the file is missing, unreadable, not a YAML
                mapping, or contains invalid fields
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file) as f:
                yaml_content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        # An empty file means defaults
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e}",
                hint="See DetectorSettings for the accepted fields.",
            ) from e
