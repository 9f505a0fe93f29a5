"""Configuration defaults and filenames."""

from __future__ import annotations

from sitecache.constants.cache import CACHE_FILENAME, FILE_HASH_CHUNK_SIZE

CONFIG_FILENAME: str = "sitecache.yaml"

DEFAULT_CACHE_FILE: str = CACHE_FILENAME
DEFAULT_ENABLED: bool = True
DEFAULT_HASH_CHUNK_SIZE: int = FILE_HASH_CHUNK_SIZE

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"cache_file", "enabled", "hash_chunk_size"})
