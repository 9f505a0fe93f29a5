"""Exceptions raised while reading or decoding s-expressions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecache.exceptions.base import SitecacheError

if TYPE_CHECKING:
    from sitecache.sexp.tree import Sexp


class SexpParseError(SitecacheError, ValueError):
    """Raised when text is not a well-formed s-expression."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.message = message
        self.offset = offset


class InvalidSexpError(SitecacheError, ValueError):
    """Raised when a well-formed tree does not have the expected shape.

    ``sexp`` is the offending sub-tree and ``context`` a short label naming
    what was being decoded (``"cache"``, ``"last_build_date"``, ...).
    """

    def __init__(self, sexp: Sexp, context: str) -> None:
        super().__init__(f"Invalid {context} s-expression: {sexp}")
        self.sexp = sexp
        self.context = context
