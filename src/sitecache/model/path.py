"""Resource paths used as cache keys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

from sitecache.constants.cache import ABSOLUTE_PATH_TAG, PATH_CONTEXT, RELATIVE_PATH_TAG
from sitecache.exceptions import InvalidSexpError
from sitecache.sexp import Atom, Node, Sexp, atom, node

_SEPARATOR: str = "/"


@total_ordering
@dataclass(frozen=True)
class ResourcePath:
    """Identifier of a resource, either absolute or relative to the site root."""

    fragments: tuple[str, ...] = ()
    is_absolute: bool = True

    @classmethod
    def of(cls, fragments: Iterable[str], *, absolute: bool = True) -> ResourcePath:
        """Build a path from fragments, dropping empty and ``.`` fragments."""
        cleaned = tuple(fragment for fragment in fragments if fragment and fragment != ".")
        return cls(fragments=cleaned, is_absolute=absolute)

    @classmethod
    def from_string(cls, raw: str) -> ResourcePath:
        """Parse ``/a/b.md`` (absolute) or ``a/b.md`` (relative)."""
        return cls.of(raw.split(_SEPARATOR), absolute=raw.startswith(_SEPARATOR))

    def __truediv__(self, fragment: str) -> ResourcePath:
        return ResourcePath.of((*self.fragments, *fragment.split(_SEPARATOR)), absolute=self.is_absolute)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ResourcePath):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        joined = _SEPARATOR.join(self.fragments)
        if self.is_absolute:
            return _SEPARATOR + joined
        return joined or "."

    @property
    def name(self) -> str:
        """Final fragment, or an empty string for the root."""
        return self.fragments[-1] if self.fragments else ""

    def to_tree(self) -> Node:
        """Encode as ``(absolute|relative (fragment ...))``."""
        tag = ABSOLUTE_PATH_TAG if self.is_absolute else RELATIVE_PATH_TAG
        return node([atom(tag), node(atom(fragment) for fragment in self.fragments)])

    @classmethod
    def from_tree(cls, tree: Sexp) -> ResourcePath:
        """Decode a tree produced by :meth:`to_tree`."""
        if not isinstance(tree, Node) or len(tree) != 2:
            raise InvalidSexpError(tree, PATH_CONTEXT)
        tag, fragments = tree.children
        if not isinstance(tag, Atom) or tag.value not in {ABSOLUTE_PATH_TAG, RELATIVE_PATH_TAG}:
            raise InvalidSexpError(tree, PATH_CONTEXT)
        if not isinstance(fragments, Node):
            raise InvalidSexpError(tree, PATH_CONTEXT)
        values: list[str] = []
        for child in fragments.children:
            if not isinstance(child, Atom):
                raise InvalidSexpError(tree, PATH_CONTEXT)
            values.append(child.value)
        return cls(fragments=tuple(values), is_absolute=tag.value == ABSOLUTE_PATH_TAG)

    def _sort_key(self) -> tuple[bool, tuple[str, ...]]:
        return (not self.is_absolute, self.fragments)
