"""Config data model for sitecache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sitecache.constants.config import DEFAULT_CACHE_FILE, DEFAULT_ENABLED, DEFAULT_HASH_CHUNK_SIZE


@dataclass(frozen=True)
class SitecacheConfig:
    """Resolved cache config."""

    cache_file: str = DEFAULT_CACHE_FILE
    enabled: bool = DEFAULT_ENABLED
    hash_chunk_size: int = DEFAULT_HASH_CHUNK_SIZE

    def cache_path(self, root: Path) -> Path:
        """Location of the cache file; relative paths resolve against ``root``."""
        path = Path(self.cache_file)
        if path.is_absolute():
            return path
        return root / path
