"""Shared pytest fixtures for cache tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitecache.cache import BuildCache, CacheEntry, make_entry
from sitecache.model import DependencySet, ResourcePath


@pytest.fixture()
def index_path() -> ResourcePath:
    return ResourcePath.from_string("/index.md")


@pytest.fixture()
def template_deps() -> DependencySet:
    """Dependencies a typical page discovers while rendering."""
    return DependencySet.of("/templates/layout.html", "/templates/header.html")


@pytest.fixture()
def legacy_entry() -> CacheEntry:
    """An entry without build date, as written by older pipelines."""
    return make_entry("deadbeef", DependencySet.empty())


@pytest.fixture()
def sample_cache(template_deps: DependencySet, legacy_entry: CacheEntry) -> BuildCache:
    """A cache mixing dated, undated, dependency-free and dependent entries."""
    return (
        BuildCache.from_pairs([("/about.md", legacy_entry)])
        .update("/index.md", deps=template_deps, now=1_700_000_000, content="abc123")
        .update("/posts/first post.md", now=1000, content="f00d")
    )


@pytest.fixture()
def site_root(tmp_path: Path) -> Path:
    """A tiny site with two pages and one template."""
    root = tmp_path / "site"
    (root / "pages").mkdir(parents=True)
    (root / "templates").mkdir()
    (root / "pages" / "index.md").write_text("# Home\n", encoding="utf-8")
    (root / "pages" / "about.md").write_text("# About\n", encoding="utf-8")
    (root / "templates" / "layout.html").write_text("<html>{{ body }}</html>\n", encoding="utf-8")
    return root
