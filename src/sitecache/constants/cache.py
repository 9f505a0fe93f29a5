"""Constants used by the build cache codec and persistence."""

from __future__ import annotations

CACHE_FILENAME: str = ".sitecache"
CACHE_TEMP_PREFIX: str = ".sitecache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
FILE_HASH_CHUNK_SIZE: int = 65536

# Context labels attached to InvalidSexpError.
CACHE_CONTEXT: str = "cache"
LAST_BUILD_DATE_CONTEXT: str = "last_build_date"
PATH_CONTEXT: str = "path"
DEPS_CONTEXT: str = "deps"

ABSOLUTE_PATH_TAG: str = "absolute"
RELATIVE_PATH_TAG: str = "relative"
