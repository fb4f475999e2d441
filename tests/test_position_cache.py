"""Tests for PositionCache."""

from concurrent.futures import ThreadPoolExecutor

from graphfinder import PositionCache


def test_miss_returns_none():
    assert PositionCache().get("A") is None


def test_store_then_get():
    cache = PositionCache()
    assert cache.store("A", (1.0, 2.0)) == (1.0, 2.0)
    assert cache.get("A") == (1.0, 2.0)
    assert "A" in cache
    assert len(cache) == 1
    assert list(cache) == ["A"]


def test_first_write_wins():
    """A second store for the same label keeps and returns the first value."""
    cache = PositionCache()
    first = (1.0, 2.0)
    cache.store("A", first)
    assert cache.store("A", (9.0, 9.0)) is first
    assert cache.get("A") is first


def test_concurrent_writers_agree():
    cache = PositionCache()

    def write(i):
        return cache.store("A", (float(i), 0.0))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(write, range(64)))

    assert len(set(results)) == 1
    assert results[0] == cache.get("A")
    assert len(cache) == 1
