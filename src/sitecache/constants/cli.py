"""CLI text and output formats."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "sitecache - inspect and maintain the incremental build cache of a static site.\n"
    "\n"
    "The cache records, per resource, the last content digest, the dynamic\n"
    "dependencies discovered while building it and the build timestamp."
)

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})

EXIT_OK: int = 0
EXIT_INVALID_CACHE: int = 1
EXIT_CONFIG_ERROR: int = 2
