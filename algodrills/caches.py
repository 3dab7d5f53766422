"""Cache-like maps: LRU eviction, all-O(1) frequency counting and O(1) set-all."""

from __future__ import annotations

from collections import OrderedDict
from itertools import count
from typing import Optional

MISSING = -1


class LRUCache:
    """Key-value store of bounded size that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._data: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for key and mark it recently used; -1 if absent."""
        if key not in self._data:
            return MISSING
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: int, value: int) -> None:
        """Store value under key, evicting the least recently used key when full."""
        if key in self._data:
            self._data[key] = value
            self._data.move_to_end(key)
            return
        if len(self._data) == self.capacity:
            self._data.popitem(last=False)
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)


class _Bucket:
    """A node of the frequency list: every key counted exactly ``count`` times."""

    __slots__ = ("count", "keys", "prev", "next")

    def __init__(self, count: int) -> None:
        self.count = count
        self.keys: dict[str, None] = {}
        self.prev: Optional[_Bucket] = None
        self.next: Optional[_Bucket] = None


class AllOne:
    """Counts string keys; increments, decrements and min/max lookups run in O(1)."""

    def __init__(self) -> None:
        self._head = _Bucket(0)
        self._tail = _Bucket(0)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._where: dict[str, _Bucket] = {}

    @staticmethod
    def _insert_after(anchor: _Bucket, count: int) -> _Bucket:
        bucket = _Bucket(count)
        following = anchor.next
        anchor.next = bucket
        bucket.prev = anchor
        bucket.next = following
        following.prev = bucket
        return bucket

    @staticmethod
    def _unlink(bucket: _Bucket) -> None:
        bucket.prev.next = bucket.next
        bucket.next.prev = bucket.prev

    def inc(self, key: str) -> None:
        """Increase the count of key by one, adding it with count 1 if new."""
        bucket = self._where.get(key)
        if bucket is None:
            first = self._head.next
            target = first if first.count == 1 else self._insert_after(self._head, 1)
        else:
            following = bucket.next
            if following.count == bucket.count + 1:
                target = following
            else:
                target = self._insert_after(bucket, bucket.count + 1)
            del bucket.keys[key]
            if not bucket.keys:
                self._unlink(bucket)
        target.keys[key] = None
        self._where[key] = target

    def dec(self, key: str) -> None:
        """Decrease the count of key by one, dropping it at zero; KeyError if absent."""
        bucket = self._where.get(key)
        if bucket is None:
            raise KeyError(key)
        del bucket.keys[key]
        if bucket.count == 1:
            del self._where[key]
        else:
            previous = bucket.prev
            if previous.count == bucket.count - 1:
                target = previous
            else:
                target = self._insert_after(previous, bucket.count - 1)
            target.keys[key] = None
            self._where[key] = target
        if not bucket.keys:
            self._unlink(bucket)

    def get_max_key(self) -> str:
        """A key with the highest count, or an empty string when nothing is counted."""
        last = self._tail.prev
        return "" if last is self._head else next(iter(last.keys))

    def get_min_key(self) -> str:
        """A key with the lowest count, or an empty string when nothing is counted."""
        first = self._head.next
        return "" if first is self._tail else next(iter(first.keys))


class SetAllHashMap:
    """Hash map with a set_all operation that runs in constant time."""

    def __init__(self) -> None:
        self._clock = count()
        self._entries: dict[int, tuple[int, int]] = {}
        self._all_value = MISSING
        self._all_time = 0

    def put(self, key: int, value: int) -> None:
        self._entries[key] = (value, next(self._clock))

    def get(self, key: int) -> int:
        """Return the current value of key, or -1 if it was never put."""
        entry = self._entries.get(key)
        if entry is None:
            return MISSING
        value, stamp = entry
        return self._all_value if stamp < self._all_time else value

    def set_all(self, value: int) -> None:
        """Give every key present so far the same value."""
        self._all_time = next(self._clock)
        self._all_value = value