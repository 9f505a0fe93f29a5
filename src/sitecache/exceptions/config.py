"""Configuration-related exceptions."""

from __future__ import annotations

from sitecache.exceptions.base import SitecacheError


class ConfigError(SitecacheError, ValueError):
    """Raised when sitecache configuration is invalid."""
