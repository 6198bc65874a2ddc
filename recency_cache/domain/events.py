"""Event records emitted by the recency cache.

Each record is immutable and timestamped when it is built. The cache only
builds a record when a listener is registered to receive it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EvictionEvent:
    """Emitted after the least recently used entry has been evicted."""

    key: Any
    value: Any
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def timestamp_ms(self) -> int:
        """Eviction instant as milliseconds since the epoch."""
        return _to_millis(self.timestamp)


class _NoValue:
    """Marker for a put that had no previous value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue()


@dataclass(frozen=True)
class PutEvent:
    """Emitted after an entry has been inserted or updated.

    ``previous_value`` is ``NO_VALUE`` for a fresh insertion. A stored None
    that gets overwritten is reported as an update with ``previous_value=None``.
    """

    key: Any
    value: Any
    previous_value: Any = NO_VALUE
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def is_update(self) -> bool:
        """True when this put overwrote an existing value."""
        return self.previous_value is not NO_VALUE

    @property
    def timestamp_ms(self) -> int:
        return _to_millis(self.timestamp)


@dataclass(frozen=True)
class EvictedEntry:
    """Key and value handed back to the caller of an eviction."""

    key: Any
    value: Any
    evicted_at: datetime = field(default_factory=_utcnow)

    @property
    def evicted_timestamp_ms(self) -> int:
        return _to_millis(self.evicted_at)


# ---------------------------------------------------------------------------
# Listener types
# ---------------------------------------------------------------------------

# Listeners run synchronously while the cache lock is held.
EvictionListener = Callable[[EvictionEvent], None]
PutListener = Callable[[PutEvent], None]
