"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from django.core.cache import cache

from events.cache import EVENT_LIST_KEY, event_detail_key, event_list_ttl


def prime(*keys):
    for key in keys:
        cache.set(key, {"cached": True})


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, make_event, django_capture_on_commit_callbacks):
        """Saving an event invalidates the events:list cache key."""
        event = make_event()
        prime(EVENT_LIST_KEY)
        event.title = "Renamed"
        with django_capture_on_commit_callbacks(execute=True):
            event.save()
        assert cache.get(EVENT_LIST_KEY) is None

    def test_event_save_invalidates_detail_cache(self, make_event, django_capture_on_commit_callbacks):
        """Saving an event invalidates the events:{id} cache key."""
        event = make_event()
        prime(event_detail_key(event.id))
        with django_capture_on_commit_callbacks(execute=True):
            event.save()
        assert cache.get(event_detail_key(event.id)) is None

    def test_event_delete_invalidates_detail_cache(self, make_event, django_capture_on_commit_callbacks):
        event = make_event()
        key = event_detail_key(event.id)
        prime(key, EVENT_LIST_KEY)
        with django_capture_on_commit_callbacks(execute=True):
            event.delete()
        assert cache.get(key) is None
        assert cache.get(EVENT_LIST_KEY) is None

    def test_booking_save_invalidates_event_caches(
        self, make_event, make_booking, django_capture_on_commit_callbacks
    ):
        """Saving a booking invalidates the availability shown for its event."""
        event = make_event()
        other = make_event(title="Other")
        prime(EVENT_LIST_KEY, event_detail_key(event.id), event_detail_key(other.id))

        with django_capture_on_commit_callbacks(execute=True):
            make_booking(event, 2)

        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(event_detail_key(event.id)) is None
        assert cache.get(event_detail_key(other.id)) == {"cached": True}

    def test_booking_delete_invalidates_detail_cache(
        self, make_event, make_booking, django_capture_on_commit_callbacks
    ):
        event = make_event()
        booking = make_booking(event, 1)
        prime(event_detail_key(event.id))
        with django_capture_on_commit_callbacks(execute=True):
            booking.delete()
        assert cache.get(event_detail_key(event.id)) is None

    def test_invalidation_waits_for_commit(
        self, make_event, make_booking, django_capture_on_commit_callbacks
    ):
        """Cached availability survives until the booking's transaction commits."""
        event = make_event()
        key = event_detail_key(event.id)

        with django_capture_on_commit_callbacks() as callbacks:
            make_booking(event, 2)
            prime(key)

        assert cache.get(key) == {"cached": True}
        for callback in callbacks:
            callback()
        assert cache.get(key) is None


class TestEventListTtl:
    """Tests for the lifetime of the cached event list."""

    NOW = datetime(2026, 5, 1, 18, 0, tzinfo=timezone.utc)

    def test_default_ttl_without_events(self, settings):
        settings.EVENT_CACHE_TTL = 60
        assert event_list_ttl(None, self.NOW) == 60

    def test_default_ttl_when_next_start_is_far(self, settings):
        settings.EVENT_CACHE_TTL = 60
        assert event_list_ttl(self.NOW + timedelta(days=1), self.NOW) == 60

    def test_ttl_ends_when_next_event_starts(self, settings):
        settings.EVENT_CACHE_TTL = 60
        assert event_list_ttl(self.NOW + timedelta(seconds=15), self.NOW) == 15

    def test_event_starting_now_is_not_cached(self, settings):
        settings.EVENT_CACHE_TTL = 60
        assert event_list_ttl(self.NOW + timedelta(milliseconds=300), self.NOW) == 0
