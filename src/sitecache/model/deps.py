"""Sets of dynamically discovered dependencies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sitecache.constants.cache import DEPS_CONTEXT
from sitecache.exceptions import InvalidSexpError
from sitecache.model.path import ResourcePath
from sitecache.sexp import Node, Sexp, node


class DependencySet:
    """Immutable set of resource paths discovered while building a resource."""

    __slots__ = ("_paths",)

    def __init__(self, paths: Iterable[ResourcePath] = ()) -> None:
        self._paths: frozenset[ResourcePath] = frozenset(paths)

    @classmethod
    def empty(cls) -> DependencySet:
        return _EMPTY

    @classmethod
    def of(cls, *paths: ResourcePath | str) -> DependencySet:
        """Build a set from paths or their textual form."""
        return cls(ResourcePath.from_string(path) if isinstance(path, str) else path for path in paths)

    @property
    def is_empty(self) -> bool:
        return not self._paths

    def union(self, other: DependencySet) -> DependencySet:
        return DependencySet(self._paths | other._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[ResourcePath]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencySet):
            return NotImplemented
        return self._paths == other._paths

    def __hash__(self) -> int:
        return hash(self._paths)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(path) for path in self]!r})"

    def render(self) -> str:
        """Human-readable listing, e.g. ``{/a.md, /b.md}``."""
        return "{" + ", ".join(str(path) for path in self) + "}"

    def to_tree(self) -> Node:
        """Encode as a node of path trees in sorted order."""
        return node(path.to_tree() for path in self)

    @classmethod
    def from_tree(cls, tree: Sexp) -> DependencySet:
        """Decode a tree produced by :meth:`to_tree`."""
        if not isinstance(tree, Node):
            raise InvalidSexpError(tree, DEPS_CONTEXT)
        paths: list[ResourcePath] = []
        for child in tree.children:
            try:
                paths.append(ResourcePath.from_tree(child))
            except InvalidSexpError as exc:
                raise InvalidSexpError(tree, DEPS_CONTEXT) from exc
        return cls(paths)


_EMPTY = DependencySet()
