"""Shared file I/O helpers."""

from .files import file_sha256, write_text_atomic
from .persistence import load_cache, read_cache, save_cache

__all__ = ["file_sha256", "load_cache", "read_cache", "save_cache", "write_text_atomic"]
