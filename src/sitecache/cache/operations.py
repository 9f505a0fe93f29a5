"""Function-style API over :class:`BuildCache` values."""

from __future__ import annotations

from collections.abc import Iterable

from sitecache.cache.entry import CacheEntry
from sitecache.cache.store import BuildCache, LookupResult, PathLike
from sitecache.model import DependencySet
from sitecache.sexp import Node, Sexp, from_string, to_string


def empty() -> BuildCache:
    """Return the cache with no keys."""
    return BuildCache.empty()


def from_pairs(pairs: Iterable[tuple[PathLike, CacheEntry]]) -> BuildCache:
    """Build a cache; later duplicates replace earlier ones."""
    return BuildCache.from_pairs(pairs)


def update(
    cache: BuildCache,
    path: PathLike,
    *,
    deps: DependencySet | None = None,
    now: int,
    content: str,
) -> BuildCache:
    return cache.update(path, deps=deps, now=now, content=content)


def get(cache: BuildCache, path: PathLike) -> LookupResult | None:
    return cache.lookup(path)


def equal(left: BuildCache, right: BuildCache) -> bool:
    return left == right


def render(cache: BuildCache) -> str:
    return cache.render()


def to_tree(cache: BuildCache) -> Node:
    return cache.to_tree()


def from_tree(tree: Sexp) -> BuildCache:
    return BuildCache.from_tree(tree)


def dumps(cache: BuildCache) -> str:
    """Serialize a cache to its textual s-expression form."""
    return to_string(cache.to_tree())


def loads(text: str) -> BuildCache:
    """Parse and decode a cache.

    Raises:
        SexpParseError: ``text`` is not a single well-formed s-expression.
        InvalidSexpError: the tree does not describe a cache.
    """
    return BuildCache.from_tree(from_string(text))
