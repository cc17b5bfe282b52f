"""An integer hash map built from separately chained buckets."""

from __future__ import annotations

from typing import Any

DEFAULT_BUCKETS = 10000
MISSING = -1


class HashMap:
    """Maps integer keys to values using ``key % bucket_count`` chaining.

    ``get`` returns -1 for an absent key, as the map's interface specifies.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKETS) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self._buckets: list[list[list[Any]]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def _bucket(self, key: int) -> list[list[Any]]:
        return self._buckets[key % len(self._buckets)]

    def put(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1

    def get(self, key: int) -> Any:
        """Return the value stored under ``key``, or -1 if there is none."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return MISSING

    def remove(self, key: int) -> None:
        """Drop ``key`` if present; absent keys are ignored."""
        bucket = self._bucket(key)
        for index, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[index]
                self._size -= 1
                return

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))