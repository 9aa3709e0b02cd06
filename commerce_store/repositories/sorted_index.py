"""
Sorted Index - ordered secondary index over store entities

A list kept sorted with bisect. Each entry remembers the key it was inserted
with, so an entity must be removed *before* its key fields change and added
back afterwards; the index never repositions an entry in place.
"""
from bisect import bisect_left, insort
from typing import Any, Callable, Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

T = TypeVar('T')


class SortedIndex(Generic[T]):
    """
    Ordered index keyed by a derived sort key

    Args:
        key: Sort key function (must yield a total order)
        identity: Function returning the entry's stable identity
    """

    def __init__(self, key: Callable[[T], Any], identity: Callable[[T], Hashable]):
        self._key = key
        self._identity = identity
        self._entries: List[Tuple[Any, T]] = []
        self._keys_by_identity: Dict[Hashable, Any] = {}

    def add(self, item: T) -> None:
        """Insert `item` at the position given by its current key"""
        ident = self._identity(item)
        if item in self:
            raise ValueError(f"Entry already indexed: {ident}")

        sort_key = self._key(item)
        self._keys_by_identity[ident] = sort_key
        insort(self._entries, (sort_key, item), key=lambda entry: entry[0])

    def remove(self, item: T) -> bool:
        """
        Remove `item` using the key it was inserted with

        Returns:
            True if the entry was present
        """
        ident = self._identity(item)
        sort_key = self._keys_by_identity.pop(ident, None)
        if sort_key is None:
            return False

        pos = bisect_left(self._entries, sort_key, key=lambda entry: entry[0])
        while pos < len(self._entries) and self._entries[pos][0] == sort_key:
            if self._identity(self._entries[pos][1]) == ident:
                del self._entries[pos]
                return True
            pos += 1

        raise RuntimeError(f"Sorted index out of sync for entry {ident}")

    def __contains__(self, item: T) -> bool:
        return self._identity(item) in self._keys_by_identity

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return (item for _, item in self._entries)

    def keys(self) -> Tuple[Any, ...]:
        """Sort keys in order"""
        return tuple(sort_key for sort_key, _ in self._entries)

    def snapshot(self) -> Tuple[T, ...]:
        """Read-only copy of the entries in order"""
        return tuple(self)
