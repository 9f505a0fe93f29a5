"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from sitecache.cache import BuildCache
from sitecache.config import SitecacheConfig, load_config
from sitecache.constants.cli import EXIT_CONFIG_ERROR, EXIT_INVALID_CACHE, EXIT_OK
from sitecache.exceptions import ConfigError, InvalidSexpError, SexpParseError
from sitecache.io import file_sha256, load_cache, read_cache, save_cache
from sitecache.model import DependencySet, ResourcePath

logger = logging.getLogger(__name__)


def cache_records(cache: BuildCache) -> list[dict[str, object]]:
    """Flatten a cache into JSON-friendly records sorted by path."""
    return [
        {
            "path": str(path),
            "hash": entry.hashed_content,
            "deps": [str(dep) for dep in entry.dynamic_dependencies],
            "last_build_date": entry.last_build_date,
        }
        for path, entry in sorted(cache.items())
    ]


def resource_path_for(file_path: Path, root: Path) -> ResourcePath:
    """Map a file under ``root`` to its absolute resource path."""
    relative = file_path.resolve().relative_to(root.resolve())
    return ResourcePath.of(relative.parts, absolute=True)


def handle_show(args: argparse.Namespace) -> int:
    """Print the cache of a site in text or JSON form."""
    config = _load_config_or_none(args)
    if config is None:
        return EXIT_CONFIG_ERROR

    cache = load_cache(config.cache_path(args.root))
    if args.format == "json":
        print(json.dumps(cache_records(cache), indent=2, sort_keys=True))
    else:
        print(cache.render())
    return EXIT_OK


def handle_validate(args: argparse.Namespace) -> int:
    """Strictly parse the cache file and report whether it is usable."""
    config = _load_config_or_none(args)
    if config is None:
        return EXIT_CONFIG_ERROR

    cache_path = config.cache_path(args.root)
    if not cache_path.is_file():
        print(f"No cache file at {cache_path}.")
        return EXIT_OK

    try:
        cache = read_cache(cache_path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read cache file {cache_path}: {exc}", file=sys.stderr)
        return EXIT_INVALID_CACHE
    except SexpParseError as exc:
        print(f"Malformed cache file {cache_path}: {exc}", file=sys.stderr)
        return EXIT_INVALID_CACHE
    except InvalidSexpError as exc:
        cause = exc.__cause__
        detail = f" (caused by: {cause})" if cause is not None else ""
        print(f"Invalid cache file {cache_path}: {exc}{detail}", file=sys.stderr)
        return EXIT_INVALID_CACHE

    print(f"Cache file is valid: {len(cache)} entries.")
    return EXIT_OK


def handle_update(args: argparse.Namespace) -> int:
    """Hash the given files and record them in the cache."""
    config = _load_config_or_none(args)
    if config is None:
        return EXIT_CONFIG_ERROR
    if not config.enabled:
        print("Cache is disabled by configuration; nothing recorded.")
        return EXIT_OK

    root: Path = args.root
    try:
        resources = [(resource_path_for(path, root), path) for path in args.files]
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    deps = DependencySet.of(*args.dep)
    now = args.now if args.now is not None else int(time.time())
    cache_path = config.cache_path(root)
    cache = load_cache(cache_path)

    for resource, file_path in resources:
        try:
            digest = file_sha256(file_path, config.hash_chunk_size)
        except OSError as exc:
            print(f"Cannot hash {file_path}: {exc}", file=sys.stderr)
            return EXIT_INVALID_CACHE
        cache = cache.update(resource, deps=deps, now=now, content=digest)
        logger.info("Recorded %s (%s)", resource, digest[:12])

    save_cache(cache_path, cache)
    return EXIT_OK


def _load_config_or_none(args: argparse.Namespace) -> SitecacheConfig | None:
    try:
        return load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None
