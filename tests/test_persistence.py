"""Tests for cache read/write behavior."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sitecache.cache import BuildCache
from sitecache.constants.cache import CACHE_TEMP_PREFIX
from sitecache.exceptions import InvalidSexpError, SexpParseError
from sitecache.io import load_cache, read_cache, save_cache


def test_cache_roundtrip(tmp_path: Path, sample_cache: BuildCache) -> None:
    cache_path = tmp_path / ".sitecache"

    save_cache(cache_path, sample_cache)
    loaded = load_cache(cache_path)

    assert loaded == sample_cache
    assert cache_path.read_text(encoding="utf-8").endswith(")\n")
    assert not [item for item in tmp_path.iterdir() if item.name.startswith(CACHE_TEMP_PREFIX)]


def test_save_overwrites_previous_cache(tmp_path: Path, sample_cache: BuildCache) -> None:
    cache_path = tmp_path / ".sitecache"
    save_cache(cache_path, sample_cache)

    save_cache(cache_path, BuildCache.empty())

    assert load_cache(cache_path) == BuildCache.empty()


def test_missing_cache_file_starts_empty(tmp_path: Path) -> None:
    assert load_cache(tmp_path / "missing") == BuildCache.empty()


@pytest.mark.parametrize(
    "content",
    [
        "(((absolute (a.md)) (abc ()",
        "just-an-atom",
        "(((absolute (a.md)) (abc () tomorrow)))",
        "",
        "(((absolute (a.md)) (abc () " + "9" * 5000 + ")))",
        "(" * 5000 + ")" * 5000,
        "(" * 5000,
    ],
    ids=["truncated", "atom", "bad-date", "empty-file", "oversized-date", "deep-nesting", "deep-unclosed"],
)
def test_invalid_cache_falls_back(
    tmp_path: Path, content: str, caplog: pytest.LogCaptureFixture
) -> None:
    cache_path = tmp_path / ".sitecache"
    cache_path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="sitecache.io.persistence"):
        loaded = load_cache(cache_path)

    assert loaded == BuildCache.empty()
    assert "Ignoring malformed cache file" in caplog.text


def test_non_utf8_cache_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    cache_path = tmp_path / ".sitecache"
    cache_path.write_bytes(b"\xff\xfe(\x00")

    with caplog.at_level(logging.WARNING, logger="sitecache.io.persistence"):
        assert load_cache(cache_path) == BuildCache.empty()

    assert "Failed to read cache file" in caplog.text


def test_read_cache_is_strict(tmp_path: Path) -> None:
    cache_path = tmp_path / ".sitecache"

    cache_path.write_text("(oops", encoding="utf-8")
    with pytest.raises(SexpParseError):
        read_cache(cache_path)

    cache_path.write_text("(oops)", encoding="utf-8")
    with pytest.raises(InvalidSexpError):
        read_cache(cache_path)

    with pytest.raises(FileNotFoundError):
        read_cache(tmp_path / "missing")
