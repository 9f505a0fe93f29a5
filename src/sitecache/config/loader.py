"""Config loading and validation for sitecache."""

from __future__ import annotations

from pathlib import Path

import yaml

from sitecache.config.model import SitecacheConfig
from sitecache.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CACHE_FILE,
    DEFAULT_ENABLED,
    DEFAULT_HASH_CHUNK_SIZE,
)
from sitecache.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SitecacheConfig:
    """Load and validate config from ``sitecache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SitecacheConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    cache_file = raw.get("cache_file", DEFAULT_CACHE_FILE)
    if not isinstance(cache_file, str) or not cache_file.strip():
        raise ConfigError("cache_file must be a non-empty string")

    enabled = raw.get("enabled", DEFAULT_ENABLED)
    if not isinstance(enabled, bool):
        raise ConfigError("enabled must be a boolean")

    hash_chunk_size = raw.get("hash_chunk_size", DEFAULT_HASH_CHUNK_SIZE)
    if isinstance(hash_chunk_size, bool) or not isinstance(hash_chunk_size, int) or hash_chunk_size <= 0:
        raise ConfigError("hash_chunk_size must be a positive integer")

    return SitecacheConfig(
        cache_file=cache_file.strip(),
        enabled=enabled,
        hash_chunk_size=hash_chunk_size,
    )
