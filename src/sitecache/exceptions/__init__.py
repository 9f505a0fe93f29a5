"""Shared exception hierarchy for sitecache."""

from __future__ import annotations

from .base import SitecacheError
from .config import ConfigError
from .sexp import InvalidSexpError, SexpParseError

__all__ = [
    "ConfigError",
    "InvalidSexpError",
    "SexpParseError",
    "SitecacheError",
]
