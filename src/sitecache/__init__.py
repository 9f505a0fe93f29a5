"""sitecache: persisted build cache for incremental static-site builds."""

from sitecache.cache import BuildCache, CacheEntry, dumps, loads, make_entry
from sitecache.exceptions import InvalidSexpError, SexpParseError, SitecacheError
from sitecache.model import DependencySet, ResourcePath

__version__ = "0.1.0"

__all__ = [
    "BuildCache",
    "CacheEntry",
    "DependencySet",
    "InvalidSexpError",
    "ResourcePath",
    "SexpParseError",
    "SitecacheError",
    "__version__",
    "dumps",
    "loads",
    "make_entry",
]
