"""
Tests for the bounded LRU result cache.
"""

import threading

import pytest

from pokespeare.cache import ResultCache


@pytest.mark.parametrize("capacity", [1, 2, 5])
def test_evicts_single_oldest_entry(capacity):
    """Inserting capacity + 1 keys keeps only the most recent ones."""
    cache = ResultCache(capacity)
    keys = [f"key-{i}" for i in range(capacity + 1)]
    for key in keys:
        cache.put(key, key.upper())

    assert len(cache) == capacity
    assert cache.get(keys[0]) is None
    for key in keys[1:]:
        assert cache.get(key) == key.upper()


def test_zero_capacity_always_misses():
    cache = ResultCache(0)
    cache.put("pikachu", "Pika!")
    cache.put("pikachu", "Pika pika!")

    assert cache.get("pikachu") is None
    assert len(cache) == 0
    assert cache.miss_count() == 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ResultCache(-1)


def test_get_refreshes_recency():
    """Reading A before inserting C makes B the eviction victim."""
    cache = ResultCache(2)
    cache.put("a", "A")
    cache.put("b", "B")
    assert cache.get("a") == "A"

    cache.put("c", "C")

    assert cache.get("b") is None
    assert cache.get("a") == "A"
    assert cache.get("c") == "C"


def test_put_overwrites_and_refreshes_recency():
    cache = ResultCache(2)
    cache.put("a", "old")
    cache.put("b", "B")
    cache.put("a", "new")

    cache.put("c", "C")

    assert cache.get("a") == "new"
    assert cache.get("b") is None
    assert len(cache) == 2


def test_miss_has_no_side_effect_on_entries():
    cache = ResultCache(2)
    cache.put("a", "A")
    cache.put("b", "B")
    assert cache.get("missing") is None

    cache.put("c", "C")

    # "a" is still the least recently used entry
    assert cache.get("a") is None
    assert cache.get("b") == "B"


def test_hit_and_miss_counters():
    cache = ResultCache(2)
    cache.put("a", "A")
    cache.get("a")
    cache.get("a")
    cache.get("b")

    assert cache.hit_count() == 2
    assert cache.miss_count() == 1
    stats = cache.stats()
    assert stats == {
        "capacity": 2,
        "size": 1,
        "hits": 2,
        "misses": 1,
        "hit_rate": pytest.approx(2 / 3),
    }


def test_stats_empty_cache():
    stats = ResultCache(3).stats()
    assert stats["hit_rate"] == 0.0
    assert stats["size"] == 0


def test_concurrent_access_never_exceeds_capacity():
    cache = ResultCache(8)
    sizes: list[int] = []

    def worker(offset: int) -> None:
        for i in range(500):
            key = f"key-{(offset * 31 + i) % 50}"
            cache.put(key, key)
            cache.get(f"key-{i % 50}")
            sizes.append(len(cache))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert max(sizes) <= 8
    assert len(cache) == 8
    assert cache.hit_count() + cache.miss_count() == 8 * 500
