"""Tokens for the s-expression reader and printer."""

from __future__ import annotations

import re

OPEN_PAREN: str = "("
CLOSE_PAREN: str = ")"
STRING_QUOTE: str = '"'
ESCAPE_CHAR: str = "\\"
COMMENT_CHAR: str = ";"

# Atoms matching this pattern are printed without quotes.
BARE_ATOM_PATTERN: re.Pattern[str] = re.compile(r'[^\s()";\\]+')

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}
REVERSE_ESCAPES: dict[str, str] = {value: key for key, value in ESCAPES.items()}

DECIMAL_INT_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
