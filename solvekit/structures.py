"""Keyed data structures: a random-access set, a versioned map, trip timing and an LRU cache."""

from __future__ import annotations

import random
from bisect import bisect_right
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional


class RandomizedSet:
    """A set of integers with average O(1) insert, remove and uniform random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._items: list[int] = []
        self._positions: dict[int, int] = {}
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def insert(self, val: int) -> bool:
        """Add val; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._items)
        self._items.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove val; return False if it was not present."""
        index = self._positions.pop(val, None)
        if index is None:
            return False
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._positions[last] = index
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen member; raise IndexError when the set is empty."""
        if not self._items:
            raise IndexError("get_random from an empty set")
        return self._rng.choice(self._items)


@dataclass
class _History:
    timestamps: list[int] = field(default_factory=list)
    values: list[str] = field(default_factory=list)


class TimeMap:
    """A key-value store keeping every value with the timestamp it was set at.

    Timestamps for one key are expected to be set in increasing order.
    """

    def __init__(self) -> None:
        self._histories: dict[str, _History] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record value for key at timestamp."""
        history = self._histories.setdefault(key, _History())
        history.timestamps.append(timestamp)
        history.values.append(value)

    def get(self, key: str, timestamp: int) -> str:
        """Return the value set at the latest time not after timestamp, or ""."""
        history = self._histories.get(key)
        if history is None:
            return ""
        index = bisect_right(history.timestamps, timestamp) - 1
        return history.values[index] if index >= 0 else ""


@dataclass
class _RouteStats:
    total_time: int = 0
    trips: int = 0


class UndergroundSystem:
    """Tracks passenger journeys and average travel time between stations."""

    def __init__(self) -> None:
        self._check_ins: dict[int, tuple[str, int]] = {}
        self._routes: dict[tuple[str, str], _RouteStats] = {}

    def check_in(self, passenger_id: int, station_name: str, t: int) -> None:
        """Record that a passenger entered station_name at time t."""
        self._check_ins[passenger_id] = (station_name, t)

    def check_out(self, passenger_id: int, station_name: str, t: int) -> None:
        """Record that a passenger left at station_name at time t.

        Raises KeyError if the passenger never checked in.
        """
        try:
            start_station, start_time = self._check_ins[passenger_id]
        except KeyError:
            raise KeyError(f"passenger {passenger_id} has not checked in") from None
        stats = self._routes.setdefault((start_station, station_name), _RouteStats())
        stats.total_time += t - start_time
        stats.trips += 1

    def get_average_time(self, start_station: str, end_station: str) -> float:
        """Return the mean travel time of completed trips on this route.

        Raises KeyError if no trip on the route has been completed.
        """
        stats = self._routes.get((start_station, end_station))
        if stats is None:
            raise KeyError(f"no trips from {start_station!r} to {end_station!r}")
        return stats.total_time / stats.trips


class LRUCache:
    """A fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: int) -> int:
        """Return the value for key, marking it most recently used, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store value for key, evicting the least recently used entry when full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value