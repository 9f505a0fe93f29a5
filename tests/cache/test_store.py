"""Tests for cache construction, update, lookup and equality."""

from __future__ import annotations

import pytest

from sitecache import cache as cache_ops
from sitecache.cache import BuildCache, CacheEntry, make_entry
from sitecache.model import DependencySet, ResourcePath


def test_make_entry_defaults_to_no_build_date() -> None:
    entry = make_entry("abc", DependencySet.empty())

    assert entry.last_build_date is None
    assert entry.as_tuple() == ("abc", DependencySet.empty(), None)


def test_make_entry_accepts_any_digest() -> None:
    assert make_entry("", DependencySet.empty(), 0).hashed_content == ""


def test_miss_returns_none(index_path: ResourcePath) -> None:
    assert cache_ops.get(cache_ops.empty(), index_path) is None
    assert BuildCache.empty().lookup("/anything.md") is None
    assert len(BuildCache.empty()) == 0


def test_update_then_get(index_path: ResourcePath, template_deps: DependencySet) -> None:
    cache = cache_ops.update(cache_ops.empty(), index_path, deps=template_deps, now=42, content="abc")

    assert cache_ops.get(cache, index_path) == ("abc", template_deps, 42)
    assert cache[index_path] == CacheEntry("abc", template_deps, 42)


def test_update_defaults_to_empty_deps() -> None:
    cache = BuildCache.empty().update("/a.md", now=1000, content="abc123")

    assert cache.lookup("/a.md") == ("abc123", DependencySet.empty(), 1000)


def test_update_leaves_other_keys_and_original_untouched(sample_cache: BuildCache) -> None:
    before_about = sample_cache.lookup("/about.md")
    before_index = sample_cache.lookup("/index.md")

    updated = sample_cache.update("/index.md", now=9, content="changed")

    assert updated.lookup("/about.md") == before_about
    assert updated.lookup("/index.md") == ("changed", DependencySet.empty(), 9)
    assert sample_cache.lookup("/index.md") == before_index
    assert updated is not sample_cache
    assert len(updated) == len(sample_cache)


def test_update_always_records_a_build_date(legacy_entry: CacheEntry) -> None:
    cache = BuildCache.from_pairs([("/about.md", legacy_entry)])

    assert cache.lookup("/about.md") == ("deadbeef", DependencySet.empty(), None)
    assert cache.update("/about.md", now=0, content="deadbeef").lookup("/about.md") == (
        "deadbeef",
        DependencySet.empty(),
        0,
    )


def test_cache_is_read_only(sample_cache: BuildCache, index_path: ResourcePath) -> None:
    with pytest.raises(TypeError):
        sample_cache[index_path] = make_entry("x", DependencySet.empty())  # type: ignore[index]


def test_from_pairs_last_write_wins() -> None:
    first = make_entry("one", DependencySet.empty(), 1)
    second = make_entry("two", DependencySet.of("/dep.md"), 2)

    assert cache_ops.from_pairs([("/p.md", first), ("/p.md", second)]) == cache_ops.from_pairs(
        [("/p.md", second)]
    )
    assert BuildCache.from_pairs([("/p.md", first), ("/p.md", second)]).lookup("/p.md") == (
        "two",
        DependencySet.of("/dep.md"),
        2,
    )


def test_from_pairs_treats_string_and_path_keys_alike() -> None:
    entry = make_entry("x", DependencySet.empty())

    cache = BuildCache.from_pairs([("/a.md", entry), (ResourcePath.from_string("/a.md"), entry)])

    assert len(cache) == 1


def test_equality_is_reflexive_and_symmetric(sample_cache: BuildCache) -> None:
    other = BuildCache.from_pairs(list(sample_cache.items()))

    assert cache_ops.equal(sample_cache, sample_cache)
    assert cache_ops.equal(sample_cache, other)
    assert cache_ops.equal(other, sample_cache)


@pytest.mark.parametrize(
    "changed",
    [
        make_entry("other-digest", DependencySet.of("/templates/layout.html", "/templates/header.html"), 1_700_000_000),
        make_entry("abc123", DependencySet.of("/templates/layout.html"), 1_700_000_000),
        make_entry("abc123", DependencySet.of("/templates/layout.html", "/templates/header.html"), 1_700_000_001),
        make_entry("abc123", DependencySet.of("/templates/layout.html", "/templates/header.html"), None),
    ],
    ids=["digest", "deps", "date-value", "date-presence"],
)
def test_equality_is_sensitive_to_every_field(sample_cache: BuildCache, changed: CacheEntry) -> None:
    pairs = [(path, changed if str(path) == "/index.md" else entry) for path, entry in sample_cache.items()]
    other = BuildCache.from_pairs(pairs)

    assert sample_cache != other
    assert other != sample_cache


def test_equality_requires_same_keys(sample_cache: BuildCache) -> None:
    larger = sample_cache.update("/extra.md", now=1, content="x")

    assert not cache_ops.equal(sample_cache, larger)
    assert not cache_ops.equal(larger, sample_cache)


def test_caches_are_not_hashable(sample_cache: BuildCache) -> None:
    with pytest.raises(TypeError):
        hash(sample_cache)


def test_render_lists_entries_in_path_order(sample_cache: BuildCache) -> None:
    rendered = cache_ops.render(sample_cache)

    assert rendered.splitlines() == [
        "Cache [",
        "  /about.md => deps: {}; hash: deadbeef (None);",
        "  /index.md => deps: {/templates/header.html, /templates/layout.html}; hash: abc123 (1700000000);",
        "  /posts/first post.md => deps: {}; hash: f00d (1000)",
        "]",
    ]
    assert str(sample_cache) == rendered


def test_render_empty_cache() -> None:
    assert BuildCache.empty().render() == "Cache []"
    assert repr(BuildCache.empty()) == "BuildCache(0 entries)"


def test_mapping_protocol_accepts_string_keys(sample_cache: BuildCache, index_path: ResourcePath) -> None:
    assert "/index.md" in sample_cache
    assert "/missing.md" not in sample_cache
    assert sample_cache["/index.md"] == sample_cache[index_path]
    assert sample_cache.get("/index.md") == sample_cache[index_path]
    assert sample_cache.get("/missing.md") is None
    with pytest.raises(KeyError):
        sample_cache["/missing.md"]
