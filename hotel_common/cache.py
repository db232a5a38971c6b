"""TTL cache for room search results."""
from __future__ import annotations

from typing import List, Optional, Tuple

from cachetools import TTLCache

from .schemas import RoomRead

SearchKey = Tuple[object, ...]


class RoomSearchCache:
    """Holds filtered room lists keyed by the filter values that produced them.

    Any room write must call :meth:`clear`; entries also expire after ``ttl`` seconds.
    """

    def __init__(self, ttl: int, maxsize: int = 256) -> None:
        self._cache: TTLCache[SearchKey, List[RoomRead]] = TTLCache(maxsize=maxsize, ttl=ttl)

    def get(self, key: SearchKey) -> Optional[List[RoomRead]]:
        rooms = self._cache.get(key)
        if rooms is None:
            return None
        return [room.model_copy(deep=True) for room in rooms]

    def set(self, key: SearchKey, rooms: List[RoomRead]) -> None:
        self._cache[key] = [room.model_copy(deep=True) for room in rooms]

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
