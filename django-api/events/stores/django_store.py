"""Django ORM implementations of the stores.

Each method queries the ORM and converts rows to domain models. Database
errors are re-raised as StoreError.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from functools import wraps

from django.db import DatabaseError, transaction

from events import models as orm
from events.domain import (
    Booking,
    BookingHistoryEntry,
    BookingId,
    BookingStatus,
    Capacity,
    Event,
    EventId,
    EventStatus,
    Money,
    NewEvent,
    Quantity,
    Role,
    UserId,
)
from events.stores.interfaces import BookingStore, EventStore, RoleStore, StoreError

logger = logging.getLogger(__name__)


def _wrap_database_errors(method):
    @wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except DatabaseError as exc:
            logger.warning("Store operation %s failed: %s", method.__qualname__, exc)
            raise StoreError(method.__qualname__) from exc

    return wrapper


def event_to_domain(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        organizer_id=UserId(row.organizer_id),
        title=row.title,
        description=row.description,
        venue=row.venue,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        price=Money(row.price),
        capacity=Capacity(row.capacity),
        image_url=row.image_url or None,
        category=row.category or None,
        status=EventStatus(str(row.status)),
        created_at=row.created_at,
    )


def booking_to_domain(row: orm.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        quantity=Quantity(row.quantity),
        total_price=Money(row.total_price),
        status=BookingStatus(str(row.status)),
        booking_date=row.booking_date,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    @_wrap_database_errors
    def list_active_events(self, now: datetime) -> list[Event]:
        rows = orm.Event.objects.filter(
            status=orm.Event.Status.ACTIVE, starts_at__gte=now
        ).order_by("starts_at")
        return [event_to_domain(row) for row in rows]

    @_wrap_database_errors
    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(pk=event_id.value).first()
        return event_to_domain(row) if row is not None else None

    @_wrap_database_errors
    def list_events_for_organizer(self, organizer_id: UserId) -> list[Event]:
        rows = orm.Event.objects.filter(organizer_id=organizer_id.value).order_by("-starts_at")
        return [event_to_domain(row) for row in rows]

    @_wrap_database_errors
    def create_event(self, new_event: NewEvent) -> Event:
        row = orm.Event.objects.create(
            organizer_id=new_event.organizer_id.value,
            title=new_event.title,
            description=new_event.description,
            venue=new_event.venue,
            starts_at=new_event.starts_at,
            ends_at=new_event.ends_at,
            price=new_event.price.amount,
            capacity=new_event.capacity.value,
            image_url=new_event.image_url,
            category=new_event.category,
        )
        return event_to_domain(row)


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    @_wrap_database_errors
    def get_confirmed_quantities(self, event_id: EventId) -> list[int]:
        return list(
            orm.Booking.objects.filter(
                event_id=event_id.value, status=orm.Booking.Status.CONFIRMED
            ).values_list("quantity", flat=True)
        )

    @_wrap_database_errors
    def get_confirmed_quantities_for_events(
        self, event_ids: Iterable[EventId]
    ) -> dict[EventId, list[int]]:
        result: dict[EventId, list[int]] = {event_id: [] for event_id in event_ids}
        if not result:
            return result
        rows = orm.Booking.objects.filter(
            event_id__in=[event_id.value for event_id in result],
            status=orm.Booking.Status.CONFIRMED,
        ).values_list("event_id", "quantity")
        for event_uuid, quantity in rows:
            result[EventId(event_uuid)].append(quantity)
        return result

    @_wrap_database_errors
    def insert_booking(self, booking: Booking) -> Booking:
        with transaction.atomic():
            row = orm.Booking.objects.create(
                id=booking.id.value,
                event_id=booking.event_id.value,
                user_id=booking.user_id.value,
                quantity=booking.quantity.value,
                total_price=booking.total_price.amount,
                status=booking.status.value,
                booking_date=booking.booking_date,
            )
        return booking_to_domain(row)

    @_wrap_database_errors
    def list_bookings_for_user(self, user_id: UserId) -> list[BookingHistoryEntry]:
        rows = (
            orm.Booking.objects.filter(user_id=user_id.value)
            .select_related("event")
            .order_by("-booking_date")
        )
        return [
            BookingHistoryEntry(
                booking=booking_to_domain(row),
                event_title=row.event.title,
                event_venue=row.event.venue,
                event_starts_at=row.event.starts_at,
                event_image_url=row.event.image_url or None,
            )
            for row in rows
        ]


class DjangoRoleStore(RoleStore):
    """Role lookups backed by the UserRole table."""

    @_wrap_database_errors
    def get_roles(self, user_id: UserId) -> frozenset[Role]:
        values = orm.UserRole.objects.filter(user_id=user_id.value).values_list("role", flat=True)
        return frozenset(Role(value) for value in values)
