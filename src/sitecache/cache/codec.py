"""Tree codec for cache entries.

An entry is encoded as ``(digest deps)`` when it has no build date and as
``(digest deps date)`` when it has one; the arity alone carries presence.
"""

from __future__ import annotations

from sitecache.cache.entry import CacheEntry, make_entry
from sitecache.constants.cache import CACHE_CONTEXT, LAST_BUILD_DATE_CONTEXT
from sitecache.constants.parsing import DECIMAL_INT_PATTERN
from sitecache.exceptions import InvalidSexpError
from sitecache.model import DependencySet
from sitecache.sexp import Atom, Node, Sexp, atom, node


def entry_to_tree(entry: CacheEntry) -> Node:
    """Encode an entry. Never fails."""
    children: list[Sexp] = [atom(entry.hashed_content), entry.dynamic_dependencies.to_tree()]
    if entry.last_build_date is not None:
        children.append(atom(str(entry.last_build_date)))
    return node(children)


def entry_from_tree(tree: Sexp) -> CacheEntry:
    """Decode an entry from its two- or three-element form.

    Raises:
        InvalidSexpError: labelled ``last_build_date`` when the trailing atom
            is not a base-10 integer, ``cache`` for every other malformation.
    """
    if not isinstance(tree, Node) or len(tree) not in (2, 3):
        raise InvalidSexpError(tree, CACHE_CONTEXT)

    digest, deps_tree, *rest = tree.children
    if not isinstance(digest, Atom):
        raise InvalidSexpError(tree, CACHE_CONTEXT)

    last_build_date: int | None = None
    if rest:
        raw_date = rest[0]
        if not isinstance(raw_date, Atom):
            raise InvalidSexpError(tree, CACHE_CONTEXT)
        last_build_date = parse_last_build_date(raw_date)

    try:
        dependencies = DependencySet.from_tree(deps_tree)
    except InvalidSexpError as exc:
        raise InvalidSexpError(tree, CACHE_CONTEXT) from exc

    return make_entry(digest.value, dependencies, last_build_date)


def parse_last_build_date(raw: Atom) -> int:
    """Parse a decimal timestamp atom."""
    if not DECIMAL_INT_PATTERN.fullmatch(raw.value):
        raise InvalidSexpError(raw, LAST_BUILD_DATE_CONTEXT)
    try:
        return int(raw.value)
    except ValueError as exc:
        # Digit strings beyond the interpreter's int conversion limit.
        raise InvalidSexpError(raw, LAST_BUILD_DATE_CONTEXT) from exc
