"""Django signals for cache invalidation.

Invalidation runs once the surrounding transaction commits, so a read that
lands before the commit cannot cache the old availability again.
"""

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_event
from events.models import Booking, Event


def invalidate_on_commit(event_id) -> None:
    transaction.on_commit(lambda: invalidate_event(event_id))


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_on_commit(instance.pk)


@receiver([post_save, post_delete], sender=Booking)
def invalidate_availability_cache(sender, instance, **kwargs):
    """Invalidate the event's cached availability when a booking changes."""
    invalidate_on_commit(instance.event_id)
