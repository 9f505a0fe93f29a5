"""Per-resource cache records."""

from __future__ import annotations

from dataclasses import dataclass

from sitecache.model import DependencySet


@dataclass(frozen=True)
class CacheEntry:
    """What the cache remembers about one resource after building it."""

    hashed_content: str
    dynamic_dependencies: DependencySet
    last_build_date: int | None = None

    def as_tuple(self) -> tuple[str, DependencySet, int | None]:
        return (self.hashed_content, self.dynamic_dependencies, self.last_build_date)


def make_entry(
    hashed_content: str,
    dependencies: DependencySet,
    last_build_date: int | None = None,
) -> CacheEntry:
    """Build an entry. Digests are opaque and never validated."""
    return CacheEntry(
        hashed_content=hashed_content,
        dynamic_dependencies=dependencies,
        last_build_date=last_build_date,
    )
