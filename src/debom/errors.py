"""Exception types raised across the debom package."""

from __future__ import annotations


class DebomError(Exception):
    """Base error for failures that abort a whole run."""

    exit_code: int = 1


class ConfigurationError(DebomError):
    """Raised when run configuration is invalid before any file is touched."""
