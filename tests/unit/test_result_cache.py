"""
Unit tests for the in-process result cache.
"""
from lexibridge.core.result_cache import ResultCache, make_cache_key


def test_cache_key_uses_prefix_and_length():
    long_a = "a" * 150
    long_b = "a" * 100 + "b" * 50
    assert make_cache_key(long_a, "english", "spanish") == make_cache_key(long_b, "english", "spanish")
    assert make_cache_key("hi", "english", "spanish") != make_cache_key("hi", "english", "french")
    assert make_cache_key("hi", "english", "spanish") != make_cache_key("hi!", "english", "spanish")


def test_entries_expire_after_ttl(clock):
    cache = ResultCache(ttl_seconds=60, clock=clock)
    cache.set("k", {"v": 1})
    clock.advance(59)
    assert cache.get("k") == {"v": 1}
    clock.advance(1)
    assert cache.get("k") is None
    assert "k" not in cache


def test_oldest_entries_are_evicted(clock):
    cache = ResultCache(max_size=2, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)
    assert len(cache) == 2
    assert cache.get("a") is None
    assert cache.get("c") == 3
    assert cache.stats()["evictions"] == 1


def test_values_are_copied_in_and_out(clock):
    cache = ResultCache(clock=clock)
    value = {"words": ["hola"]}
    cache.set("k", value)
    value["words"].append("mutated")

    first = cache.get("k")
    first["words"].append("also mutated")
    assert cache.get("k") == {"words": ["hola"]}


def test_stats_and_clear(clock):
    cache = ResultCache(ttl_seconds=10, max_size=5, clock=clock)
    cache.set("k", 1)
    cache.get("k")
    cache.get("missing")
    stats = cache.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 0.5
    assert stats["size"] == 1

    cache.clear()
    assert len(cache) == 0
