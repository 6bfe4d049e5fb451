import random

import pytest

from solvekit.structures import LRUCache, RandomizedSet, TimeMap, UndergroundSystem


# RandomizedSet

def test_insert_reports_new_and_duplicate():
    rs = RandomizedSet()
    assert rs.insert(1) is True
    assert rs.insert(1) is False
    assert len(rs) == 1


def test_remove_reports_presence():
    rs = RandomizedSet()
    assert rs.remove(2) is False
    rs.insert(2)
    assert rs.remove(2) is True
    assert 2 not in rs
    assert len(rs) == 0


def test_remove_middle_keeps_other_members():
    rs = RandomizedSet()
    for value in (5, 6, 7, 8):
        rs.insert(value)
    assert rs.remove(6) is True
    assert {5, 7, 8} == {v for v in (5, 6, 7, 8) if v in rs}
    assert rs.remove(8) is True
    assert rs.insert(6) is True
    assert len(rs) == 3


def test_get_random_returns_members_only():
    rs = RandomizedSet(random.Random(0))
    for value in (10, 20, 30):
        rs.insert(value)
    rs.remove(20)
    draws = {rs.get_random() for _ in range(200)}
    assert draws == {10, 30}


def test_get_random_single_member():
    rs = RandomizedSet()
    rs.insert(2)
    assert rs.get_random() == 2


def test_get_random_empty_raises():
    rs = RandomizedSet()
    with pytest.raises(IndexError):
        rs.get_random()


# TimeMap

def test_time_map_example():
    tm = TimeMap()
    tm.set("foo", "bar", 1)
    assert tm.get("foo", 1) == "bar"
    assert tm.get("foo", 3) == "bar"
    tm.set("foo", "bar2", 4)
    assert tm.get("foo", 4) == "bar2"
    assert tm.get("foo", 5) == "bar2"
    assert tm.get("foo", 3) == "bar"


def test_time_map_before_first_timestamp():
    tm = TimeMap()
    tm.set("k", "v", 10)
    assert tm.get("k", 9) == ""


def test_time_map_missing_key():
    tm = TimeMap()
    tm.set("a", "x", 1)
    assert tm.get("b", 1) == ""


def test_time_map_keys_are_independent():
    tm = TimeMap()
    tm.set("a", "one", 1)
    tm.set("b", "two", 2)
    assert tm.get("a", 100) == "one"
    assert tm.get("b", 100) == "two"
    assert tm.get("b", 1) == ""


# UndergroundSystem

def test_single_trip_average():
    system = UndergroundSystem()
    system.check_in(1, "A", 0)
    system.check_out(1, "B", 10)
    assert system.get_average_time("A", "B") == 10.0


def test_average_over_equal_trips():
    system = UndergroundSystem()
    system.check_in(1, "A", 0)
    system.check_in(2, "A", 5)
    system.check_out(1, "B", 10)
    system.check_out(2, "B", 15)
    assert system.get_average_time("A", "B") == 10.0


def test_routes_are_directional():
    system = UndergroundSystem()
    system.check_in(1, "A", 0)
    system.check_out(1, "B", 10)
    with pytest.raises(KeyError):
        system.get_average_time("B", "A")


def test_check_out_without_check_in_raises():
    system = UndergroundSystem()
    with pytest.raises(KeyError):
        system.check_out(7, "B", 3)


# LRUCache

def test_lru_example_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 10)
    cache.put(3, 3)
    assert cache.get(1) == 10
    assert cache.get(2) == -1
    assert len(cache) == 2


def test_lru_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key)
        assert len(cache) <= 3
    assert [cache.get(k) for k in (7, 8, 9)] == [7, 8, 9]
    assert cache.get(6) == -1


@pytest.mark.parametrize("capacity", [0, -1])
def test_lru_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)