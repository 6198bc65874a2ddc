"""In-memory LRU cache with explicit eviction and mutation listeners."""

from .domain.errors import CacheError, CacheInvariantError
from .domain.events import NO_VALUE, EvictedEntry, EvictionEvent, PutEvent
from .utils.lru_cache import UnboundedLRUCache
from .version import __version__

__all__ = [
    "__version__",
    "UnboundedLRUCache",
    # Events
    "EvictionEvent",
    "PutEvent",
    "EvictedEntry",
    "NO_VALUE",
    # Errors
    "CacheError",
    "CacheInvariantError",
]
