"""Utility helpers for applications embedding detect-git-service."""

from detect_git_service.utils.logging_config import configure_logging

__all__ = ["configure_logging"]
