"""Build cache data model and codec."""

from .codec import entry_from_tree, entry_to_tree
from .entry import CacheEntry, make_entry
from .operations import dumps, empty, equal, from_pairs, from_tree, get, loads, render, to_tree, update
from .store import BuildCache

__all__ = [
    "BuildCache",
    "CacheEntry",
    "dumps",
    "empty",
    "entry_from_tree",
    "entry_to_tree",
    "equal",
    "from_pairs",
    "from_tree",
    "get",
    "loads",
    "make_entry",
    "render",
    "to_tree",
    "update",
]
