"""Immutable mapping from resource paths to cache entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias

from sitecache.cache.codec import entry_from_tree, entry_to_tree
from sitecache.cache.entry import CacheEntry, make_entry
from sitecache.constants.cache import CACHE_CONTEXT
from sitecache.exceptions import InvalidSexpError
from sitecache.model import DependencySet, ResourcePath
from sitecache.sexp import Node, Sexp, node

PathLike: TypeAlias = ResourcePath | str
LookupResult: TypeAlias = tuple[str, DependencySet, int | None]


def as_path(path: PathLike) -> ResourcePath:
    """Accept either a ResourcePath or its textual form."""
    return ResourcePath.from_string(path) if isinstance(path, str) else path


class BuildCache(Mapping[ResourcePath, CacheEntry]):
    """Persistent build cache value.

    A ``BuildCache`` is never changed in place: :meth:`update` returns a new
    cache and leaves the receiver untouched, so any holder of an older value
    keeps observing it as it was. Concurrent readers need no locking; callers
    that build resources in parallel must sequence their ``update`` calls.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[ResourcePath, CacheEntry] | None = None) -> None:
        self._entries: dict[ResourcePath, CacheEntry] = dict(entries or {})

    @classmethod
    def empty(cls) -> BuildCache:
        return cls()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[PathLike, CacheEntry]]) -> BuildCache:
        """Build a cache from ``(path, entry)`` pairs.

        Pairs are applied left to right, so when a path occurs more than once
        the last occurrence wins.
        """
        entries: dict[ResourcePath, CacheEntry] = {}
        for path, entry in pairs:
            entries[as_path(path)] = entry
        return cls(entries)

    def update(
        self,
        path: PathLike,
        *,
        deps: DependencySet | None = None,
        now: int,
        content: str,
    ) -> BuildCache:
        """Return a new cache recording a build of ``path`` at ``now``."""
        entry = make_entry(content, deps if deps is not None else DependencySet.empty(), now)
        entries = dict(self._entries)
        entries[as_path(path)] = entry
        return type(self)(entries)

    def lookup(self, path: PathLike) -> LookupResult | None:
        """Return ``(hashed_content, dependencies, last_build_date)`` or None."""
        entry = self._entries.get(as_path(path))
        if entry is None:
            return None
        return entry.as_tuple()

    def __getitem__(self, path: PathLike) -> CacheEntry:
        # Mapping.get and ``in`` go through here, so string keys work for them too.
        return self._entries[as_path(path)]

    def __iter__(self) -> Iterator[ResourcePath]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuildCache):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """Debug listing, one entry per line in path order."""
        lines = [
            f"{path} => deps: {entry.dynamic_dependencies.render()}; "
            f"hash: {entry.hashed_content} ({entry.last_build_date})"
            for path, entry in sorted(self._entries.items())
        ]
        if not lines:
            return "Cache []"
        return "Cache [\n  " + ";\n  ".join(lines) + "\n]"

    def to_tree(self) -> Node:
        """Encode as a node of ``(path entry)`` pairs in path order."""
        return node(
            node([path.to_tree(), entry_to_tree(entry)]) for path, entry in sorted(self._entries.items())
        )

    @classmethod
    def from_tree(cls, tree: Sexp) -> BuildCache:
        """Decode a whole cache; the first malformed pair aborts decoding.

        Every failure inside a pair is reported against that pair with the
        ``cache`` label; the underlying error is kept as ``__cause__``.
        """
        if not isinstance(tree, Node):
            raise InvalidSexpError(tree, CACHE_CONTEXT)
        pairs: list[tuple[ResourcePath, CacheEntry]] = []
        for pair in tree.children:
            if not isinstance(pair, Node) or len(pair) != 2:
                raise InvalidSexpError(pair, CACHE_CONTEXT)
            key_tree, value_tree = pair.children
            try:
                pairs.append((ResourcePath.from_tree(key_tree), entry_from_tree(value_tree)))
            except InvalidSexpError as exc:
                raise InvalidSexpError(pair, CACHE_CONTEXT) from exc
        return cls.from_pairs(pairs)
