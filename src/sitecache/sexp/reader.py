"""Reader turning s-expression text into trees."""

from __future__ import annotations

from sitecache.constants.parsing import (
    CLOSE_PAREN,
    COMMENT_CHAR,
    ESCAPE_CHAR,
    ESCAPES,
    OPEN_PAREN,
    STRING_QUOTE,
)
from sitecache.exceptions import SexpParseError
from sitecache.sexp.tree import Atom, Node, Sexp

_DELIMITERS: frozenset[str] = frozenset({OPEN_PAREN, CLOSE_PAREN, STRING_QUOTE, COMMENT_CHAR})


def from_string(text: str) -> Sexp:
    """Parse exactly one tree from ``text``.

    Leading and trailing whitespace and ``;`` line comments are ignored.
    Anything else after the first complete tree is an error.
    """
    reader = _Reader(text)
    reader.skip_blank()
    if reader.at_end():
        raise SexpParseError("Empty input", reader.pos)
    tree = reader.read_tree()
    reader.skip_blank()
    if not reader.at_end():
        raise SexpParseError("Unexpected trailing content", reader.pos)
    return tree


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_blank(self) -> None:
        while not self.at_end():
            char = self.text[self.pos]
            if char.isspace():
                self.pos += 1
            elif char == COMMENT_CHAR:
                newline = self.text.find("\n", self.pos)
                self.pos = len(self.text) if newline == -1 else newline + 1
            else:
                return

    def read_tree(self) -> Sexp:
        """Read one tree, keeping open nodes on an explicit stack."""
        # (offset of the opening parenthesis, children read so far)
        open_nodes: list[tuple[int, list[Sexp]]] = []
        while True:
            if open_nodes:
                self.skip_blank()
                if self.at_end():
                    raise SexpParseError("Unclosed parenthesis", open_nodes[-1][0])

            char = self.text[self.pos]
            tree: Sexp
            if char == OPEN_PAREN:
                open_nodes.append((self.pos, []))
                self.pos += 1
                continue
            if char == CLOSE_PAREN:
                if not open_nodes:
                    raise SexpParseError("Unbalanced closing parenthesis", self.pos)
                self.pos += 1
                _, children = open_nodes.pop()
                tree = Node(tuple(children))
            elif char == STRING_QUOTE:
                tree = self._read_quoted_atom()
            else:
                tree = self._read_bare_atom()

            if not open_nodes:
                return tree
            open_nodes[-1][1].append(tree)

    def _read_quoted_atom(self) -> Atom:
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while not self.at_end():
            char = self.text[self.pos]
            if char == STRING_QUOTE:
                self.pos += 1
                return Atom("".join(chars))
            if char == ESCAPE_CHAR:
                if self.pos + 1 >= len(self.text):
                    break
                escaped = self.text[self.pos + 1]
                if escaped not in ESCAPES:
                    raise SexpParseError(f"Unknown escape sequence \\{escaped}", self.pos)
                chars.append(ESCAPES[escaped])
                self.pos += 2
                continue
            chars.append(char)
            self.pos += 1
        raise SexpParseError("Unterminated string", start)

    def _read_bare_atom(self) -> Atom:
        start = self.pos
        while not self.at_end():
            char = self.text[self.pos]
            if char.isspace() or char in _DELIMITERS:
                break
            if char == ESCAPE_CHAR:
                raise SexpParseError("Escape outside of quoted string", self.pos)
            self.pos += 1
        return Atom(self.text[start : self.pos])
