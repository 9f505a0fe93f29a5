"""Loading and saving build caches on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from sitecache.cache import BuildCache, dumps, loads
from sitecache.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX
from sitecache.exceptions import InvalidSexpError, SexpParseError
from sitecache.io.files import write_text_atomic

logger = logging.getLogger(__name__)


def read_cache(cache_path: Path) -> BuildCache:
    """Strictly read a cache file.

    Raises:
        OSError: the file cannot be read.
        UnicodeDecodeError: the file is not UTF-8 text.
        SexpParseError: the file is not a well-formed s-expression.
        InvalidSexpError: the file does not describe a cache.
    """
    return loads(cache_path.read_text(encoding="utf-8"))


def load_cache(cache_path: Path) -> BuildCache:
    """Load cache file if valid, otherwise return an empty cache."""
    if not cache_path.is_file():
        logger.debug("No cache file at %s, starting empty", cache_path)
        return BuildCache.empty()

    try:
        cache = read_cache(cache_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read cache file %s (%s), starting empty", cache_path, exc)
        return BuildCache.empty()
    except (SexpParseError, InvalidSexpError) as exc:
        logger.warning("Ignoring malformed cache file %s: %s", cache_path, exc)
        return BuildCache.empty()

    logger.debug("Loaded %d cache entries from %s", len(cache), cache_path)
    return cache


def save_cache(cache_path: Path, cache: BuildCache) -> None:
    """Persist cache to disk atomically."""
    write_text_atomic(
        path=cache_path,
        text=dumps(cache) + "\n",
        temp_prefix=CACHE_TEMP_PREFIX,
        temp_suffix=CACHE_TEMP_SUFFIX,
    )
    logger.debug("Saved %d cache entries to %s", len(cache), cache_path)
