"""Cache keys for event read endpoints."""

from datetime import datetime

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_detail_key(event_id) -> str:
    return f"events:{event_id}"


def cache_ttl() -> int:
    return getattr(settings, "EVENT_CACHE_TTL", 60)


def event_list_ttl(next_start: datetime | None, now: datetime) -> int:
    """Seconds the upcoming-events list may be cached.

    The list stops being accurate once its earliest event starts, so the
    lifetime never runs past that moment. Zero means do not cache.
    """
    ttl = cache_ttl()
    if next_start is not None:
        ttl = min(ttl, int((next_start - now).total_seconds()))
    return max(ttl, 0)


def invalidate_event(event_id) -> None:
    """Drop every cached response that includes the event or its availability."""
    cache.delete_many([EVENT_LIST_KEY, event_detail_key(event_id)])
