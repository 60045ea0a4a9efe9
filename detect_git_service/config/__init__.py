"""Configuration for remote selection and host classification."""

from detect_git_service.config.settings import DetectorSettings

__all__ = ["DetectorSettings"]
