"""Unbounded LRU cache with explicit eviction and mutation listeners."""

import logging
import threading
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..domain.errors import CacheInvariantError
from ..domain.events import (
    EvictedEntry,
    EvictionEvent,
    EvictionListener,
    NO_VALUE,
    PutEvent,
    PutListener,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class _Node:
    __slots__ = ("key", "value", "previous", "next")

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.previous: Optional["_Node"] = None  # toward the LRU end
        self.next: Optional["_Node"] = None  # toward the MRU end


class UnboundedLRUCache(Generic[K, V]):
    """
    Thread-safe LRU cache without a capacity limit.

    Entries are kept in a dict for lookup and in a doubly linked chain
    ordered from least recently used (head) to most recently used (tail).
    Nothing is evicted automatically: callers decide when to drop the
    oldest entry with ``evict_least_recently_used()``.

    Listeners are invoked synchronously while the cache lock is held and
    after the mutation has been applied. An exception raised by a listener
    propagates to the caller. Listeners must not call back into the same
    cache, the lock is not reentrant.
    """

    def __init__(
        self,
        eviction_listener: Optional[EvictionListener] = None,
        put_listener: Optional[PutListener] = None,
    ):
        self._index: Dict[K, _Node] = {}
        self._lru: Optional[_Node] = None
        self._mru: Optional[_Node] = None
        self._size = 0
        self._eviction_listener = eviction_listener
        self._put_listener = put_listener
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Get item and mark it most recently used.

        Returns ``default`` when the key is not cached.
        """
        with self._lock:
            node = self._index.get(key)
            if node is None:
                return default
            self._promote(node)
            return node.value

    def put(self, key: K, value: V) -> None:
        """Insert or update an item and mark it most recently used."""
        with self._lock:
            node = self._index.get(key)
            if node is None:
                previous_value = NO_VALUE
                self._index[key] = self._append(_Node(key, value))
                logger.debug("Inserted %r (size=%d)", key, self._size)
            else:
                previous_value = node.value
                node.value = value
                self._promote(node)
                logger.debug("Updated %r", key)

            if self._put_listener is not None:
                self._put_listener(PutEvent(key, value, previous_value))

    def evict_least_recently_used(self) -> Optional[EvictedEntry]:
        """Evict the least recently used item.

        Returns the evicted entry, or None when the cache is empty.
        """
        with self._lock:
            node = self._lru
            if node is None:
                return None

            del self._index[node.key]
            self._lru = node.next
            if self._lru is None:
                self._mru = None
            else:
                self._lru.previous = None
            node.next = None
            self._size -= 1

            evicted = EvictedEntry(node.key, node.value)
            logger.debug("Evicted %r (size=%d)", node.key, self._size)

            if self._eviction_listener is not None:
                self._eviction_listener(
                    EvictionEvent(evicted.key, evicted.value, evicted.evicted_at)
                )
            return evicted

    # ------------------------------------------------------------------
    # Mapping-style access
    # ------------------------------------------------------------------

    def __getitem__(self, key: K) -> V:
        with self._lock:
            node = self._index.get(key)
            if node is None:
                raise KeyError(key)
            self._promote(node)
            return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __contains__(self, key: K) -> bool:
        with self._lock:
            return key in self._index

    def __len__(self) -> int:
        with self._lock:
            return self._size

    @property
    def size(self) -> int:
        """Current number of entries."""
        return len(self)

    def items(self) -> List[Tuple[K, V]]:
        """Return snapshot of items, least recently used first."""
        with self._lock:
            return [(node.key, node.value) for node in self._walk()]

    def keys(self) -> List[K]:
        """Return snapshot of keys, least recently used first."""
        with self._lock:
            return [node.key for node in self._walk()]

    def clear(self) -> None:
        """Drop every entry without firing eviction events."""
        with self._lock:
            self._index.clear()
            self._lru = None
            self._mru = None
            self._size = 0

    # ------------------------------------------------------------------
    # Consistency check
    # ------------------------------------------------------------------

    def check_invariants(self) -> None:
        """Verify that the index, the chain and the size agree.

        Raises CacheInvariantError describing the first violation found.
        """
        with self._lock:
            if self._size != len(self._index):
                raise CacheInvariantError(
                    "size",
                    f"size is {self._size} but index holds {len(self._index)}",
                )

            if self._size == 0:
                if self._lru is not None or self._mru is not None:
                    raise CacheInvariantError(
                        "empty-ends", "empty cache still references a node"
                    )
                return

            if self._lru is None or self._mru is None:
                raise CacheInvariantError(
                    "ends", f"non-empty cache (size={self._size}) has no LRU/MRU node"
                )
            if self._lru.previous is not None:
                raise CacheInvariantError("ends", "LRU node has a previous link")
            if self._mru.next is not None:
                raise CacheInvariantError("ends", "MRU node has a next link")

            forward = 0
            node = self._lru
            last = None
            while node is not None:
                forward += 1
                if forward > self._size:
                    raise CacheInvariantError(
                        "forward-walk", f"chain is longer than size={self._size}"
                    )
                if self._index.get(node.key) is not node:
                    raise CacheInvariantError(
                        "index", f"chain node {node.key!r} is not the indexed node"
                    )
                if node.next is not None and node.next.previous is not node:
                    raise CacheInvariantError(
                        "links", f"broken back link after {node.key!r}"
                    )
                last = node
                node = node.next
            if forward != self._size or last is not self._mru:
                raise CacheInvariantError(
                    "forward-walk",
                    f"walked {forward} nodes from LRU, expected {self._size} ending at MRU",
                )

            backward = 0
            node = self._mru
            while node is not None and backward <= self._size:
                backward += 1
                last = node
                node = node.previous
            if backward != self._size or last is not self._lru:
                raise CacheInvariantError(
                    "backward-walk",
                    f"walked {backward} nodes from MRU, expected {self._size} ending at LRU",
                )

    # ------------------------------------------------------------------
    # Chain maintenance (callers hold the lock)
    # ------------------------------------------------------------------

    def _append(self, node: _Node) -> _Node:
        """Attach a fresh node at the MRU end."""
        if self._mru is None:
            self._lru = node
        else:
            node.previous = self._mru
            self._mru.next = node
        self._mru = node
        self._size += 1
        return node

    def _promote(self, node: _Node) -> None:
        """Move an existing node to the MRU end."""
        if node is self._mru:
            return

        if node is self._lru:
            self._lru = node.next
            self._lru.previous = None
        else:
            node.previous.next = node.next
            node.next.previous = node.previous

        node.previous = self._mru
        self._mru.next = node
        self._mru = node
        node.next = None

    def _walk(self) -> Iterator[_Node]:
        node = self._lru
        while node is not None:
            yield node
            node = node.next
