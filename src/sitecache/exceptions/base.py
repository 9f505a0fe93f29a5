"""Root exception type for sitecache."""

from __future__ import annotations


class SitecacheError(Exception):
    """Base class for all errors raised by sitecache."""
