"""Tests for cache event records."""

import dataclasses
from datetime import datetime, timezone

import pytest

from recency_cache.domain.events import NO_VALUE, EvictedEntry, EvictionEvent, PutEvent


class TestEvictionEvent:
    """EvictionEvent dataclass tests."""

    def test_create_eviction_event(self):
        moment = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        event = EvictionEvent(key="k", value="v", timestamp=moment)
        assert event.key == "k"
        assert event.value == "v"
        assert event.timestamp == moment

    def test_eviction_event_defaults_timestamp(self):
        before = datetime.now(timezone.utc)
        event = EvictionEvent(key="k", value="v")
        after = datetime.now(timezone.utc)
        assert before <= event.timestamp <= after

    def test_eviction_event_is_immutable(self):
        event = EvictionEvent(key="k", value="v")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.key = "other"

    def test_timestamp_ms(self):
        moment = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
        event = EvictionEvent(key="k", value="v", timestamp=moment)
        assert event.timestamp_ms == 1000


class TestPutEvent:
    """PutEvent dataclass tests."""

    def test_insert_is_not_update(self):
        event = PutEvent(key="k", value="v")
        assert event.previous_value is NO_VALUE
        assert event.is_update is False

    def test_overwrite_is_update(self):
        event = PutEvent(key="k", value="new", previous_value="old")
        assert event.previous_value == "old"
        assert event.is_update is True

    def test_overwritten_none_is_update(self):
        event = PutEvent(key="k", value="new", previous_value=None)
        assert event.is_update is True

    def test_none_value_overwrite_is_update(self):
        event = PutEvent(key="k", value=None, previous_value="old")
        assert event.is_update is True

    def test_no_value_marker(self):
        assert NO_VALUE is type(NO_VALUE)()
        assert not NO_VALUE
        assert repr(NO_VALUE) == "NO_VALUE"

    def test_put_event_defaults_timestamp(self):
        before = datetime.now(timezone.utc)
        event = PutEvent(key="k", value="v")
        after = datetime.now(timezone.utc)
        assert before <= event.timestamp <= after

    def test_put_event_is_immutable(self):
        event = PutEvent(key="k", value="v")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.value = "other"


class TestEvictedEntry:
    """EvictedEntry dataclass tests."""

    def test_create_evicted_entry(self):
        entry = EvictedEntry(key="k", value="v")
        assert entry.key == "k"
        assert entry.value == "v"
        assert entry.evicted_at.tzinfo is not None

    def test_evicted_timestamp_ms(self):
        moment = datetime(1970, 1, 1, 0, 0, 2, tzinfo=timezone.utc)
        entry = EvictedEntry(key="k", value="v", evicted_at=moment)
        assert entry.evicted_timestamp_ms == 2000
