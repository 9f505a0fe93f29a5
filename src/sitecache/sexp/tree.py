"""Tree notation: atoms and ordered nodes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from sitecache.constants.parsing import (
    BARE_ATOM_PATTERN,
    CLOSE_PAREN,
    ESCAPE_CHAR,
    OPEN_PAREN,
    REVERSE_ESCAPES,
    STRING_QUOTE,
)


@dataclass(frozen=True)
class Atom:
    """String leaf."""

    value: str

    def __str__(self) -> str:
        return to_string(self)


@dataclass(frozen=True)
class Node:
    """Ordered list of sub-trees."""

    children: tuple[Sexp, ...] = ()

    def __len__(self) -> int:
        return len(self.children)

    def __str__(self) -> str:
        return to_string(self)


Sexp: TypeAlias = Atom | Node


def atom(value: str) -> Atom:
    """Build an atom leaf."""
    return Atom(value)


def node(children: Iterable[Sexp] = ()) -> Node:
    """Build a node from any iterable of sub-trees."""
    return Node(tuple(children))


def to_string(tree: Sexp) -> str:
    """Render a tree on a single line in canonical form."""
    parts: list[str] = []
    # Trees still to print, interleaved with literal separators and closing parentheses.
    pending: list[Sexp | str] = [tree]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Atom):
            parts.append(_atom_to_string(item.value))
        else:
            parts.append(OPEN_PAREN)
            pending.append(CLOSE_PAREN)
            for index in range(len(item.children) - 1, -1, -1):
                pending.append(item.children[index])
                if index:
                    pending.append(" ")
    return "".join(parts)


def _atom_to_string(value: str) -> str:
    if BARE_ATOM_PATTERN.fullmatch(value):
        return value
    escaped = "".join(
        ESCAPE_CHAR + REVERSE_ESCAPES[char] if char in REVERSE_ESCAPES else char for char in value
    )
    return STRING_QUOTE + escaped + STRING_QUOTE
