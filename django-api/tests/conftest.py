"""Pytest configuration and shared fixtures."""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from django.utils import timezone as dj_timezone
from rest_framework.test import APIClient

from events import models as orm
from events.domain import (
    Booking,
    BookingHistoryEntry,
    BookingStatus,
    Capacity,
    Event,
    EventId,
    EventStatus,
    Money,
    NewEvent,
    Role,
    UserId,
)
from events.stores.interfaces import BookingStore, EventStore, RoleStore, StoreError


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


# ORM fixtures


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="alice", password="secret-pass-1")


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="secret-pass-2")


@pytest.fixture
def organizer(django_user_model):
    account = django_user_model.objects.create_user(username="olivia", password="secret-pass-3")
    orm.UserRole.objects.create(user=account, role=orm.UserRole.Role.ORGANIZER)
    return account


@pytest.fixture
def make_event(organizer):
    def factory(**overrides) -> orm.Event:
        fields = {
            "organizer": organizer,
            "title": "Jazz Night",
            "description": "Live jazz by the river",
            "venue": "Riverside Hall",
            "starts_at": dj_timezone.now() + timedelta(days=7),
            "price": Decimal("25.00"),
            "capacity": 50,
        }
        fields.update(overrides)
        return orm.Event.objects.create(**fields)

    return factory


@pytest.fixture
def make_booking(user):
    def factory(event: orm.Event, quantity: int = 1, **overrides) -> orm.Booking:
        fields = {
            "event": event,
            "user": user,
            "quantity": quantity,
            "total_price": event.price * quantity,
            "status": orm.Booking.Status.CONFIRMED,
            "booking_date": dj_timezone.now(),
        }
        fields.update(overrides)
        return orm.Booking.objects.create(**fields)

    return factory


# Domain fixtures and in-memory stores


def build_event(**overrides) -> Event:
    fields = {
        "id": EventId(uuid4()),
        "organizer_id": UserId(1),
        "title": "Jazz Night",
        "description": "Live jazz by the river",
        "venue": "Riverside Hall",
        "starts_at": datetime.now(timezone.utc) + timedelta(days=7),
        "ends_at": None,
        "price": Money(Decimal("25.00")),
        "capacity": Capacity(50),
        "image_url": None,
        "category": None,
        "status": EventStatus.ACTIVE,
        "created_at": datetime.now(timezone.utc),
    }
    fields.update(overrides)
    return Event(**fields)


@pytest.fixture
def event_factory():
    return build_event


class InMemoryEventStore(EventStore):
    def __init__(self, events: Iterable[Event] = ()) -> None:
        self.events = {event.id: event for event in events}
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise StoreError("event store unavailable")

    def add(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def list_active_events(self, now: datetime) -> list[Event]:
        self._check()
        events = [
            event
            for event in self.events.values()
            if event.status is EventStatus.ACTIVE and event.starts_at >= now
        ]
        return sorted(events, key=lambda event: event.starts_at)

    def get_event(self, event_id: EventId) -> Event | None:
        self._check()
        return self.events.get(event_id)

    def list_events_for_organizer(self, organizer_id: UserId) -> list[Event]:
        self._check()
        events = [event for event in self.events.values() if event.organizer_id == organizer_id]
        return sorted(events, key=lambda event: event.starts_at, reverse=True)

    def create_event(self, new_event: NewEvent) -> Event:
        self._check()
        return self.add(
            build_event(
                organizer_id=new_event.organizer_id,
                title=new_event.title,
                description=new_event.description,
                venue=new_event.venue,
                starts_at=new_event.starts_at,
                ends_at=new_event.ends_at,
                price=new_event.price,
                capacity=new_event.capacity,
                image_url=new_event.image_url,
                category=new_event.category,
            )
        )


class InMemoryBookingStore(BookingStore):
    def __init__(self, event_store: InMemoryEventStore) -> None:
        self.event_store = event_store
        self.bookings: list[Booking] = []
        self.fail_reads = False
        self.fail_writes = False

    def add(self, event: Event, quantity: int, status: BookingStatus = BookingStatus.CONFIRMED) -> None:
        from events.domain.admission import build_booking_record

        booking = build_booking_record(event, UserId(99), quantity)
        self.bookings.append(
            Booking(
                id=booking.id,
                event_id=booking.event_id,
                user_id=booking.user_id,
                quantity=booking.quantity,
                total_price=booking.total_price,
                status=status,
                booking_date=booking.booking_date,
            )
        )

    def get_confirmed_quantities(self, event_id: EventId) -> list[int]:
        if self.fail_reads:
            raise StoreError("booking store unavailable")
        return [
            booking.quantity.value
            for booking in self.bookings
            if booking.event_id == event_id and booking.status is BookingStatus.CONFIRMED
        ]

    def get_confirmed_quantities_for_events(
        self, event_ids: Iterable[EventId]
    ) -> dict[EventId, list[int]]:
        return {event_id: self.get_confirmed_quantities(event_id) for event_id in event_ids}

    def insert_booking(self, booking: Booking) -> Booking:
        if self.fail_writes:
            raise StoreError("booking store unavailable")
        self.bookings.append(booking)
        return booking

    def list_bookings_for_user(self, user_id: UserId) -> list[BookingHistoryEntry]:
        if self.fail_reads:
            raise StoreError("booking store unavailable")
        entries = []
        for booking in reversed(self.bookings):
            if booking.user_id != user_id:
                continue
            event = self.event_store.events[booking.event_id]
            entries.append(
                BookingHistoryEntry(
                    booking=booking,
                    event_title=event.title,
                    event_venue=event.venue,
                    event_starts_at=event.starts_at,
                    event_image_url=event.image_url,
                )
            )
        return entries


class InMemoryRoleStore(RoleStore):
    def __init__(self, grants: dict[UserId, set[Role]] | None = None) -> None:
        self.grants = grants or {}

    def get_roles(self, user_id: UserId) -> frozenset[Role]:
        return frozenset(self.grants.get(user_id, ()))


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store(event_store) -> InMemoryBookingStore:
    return InMemoryBookingStore(event_store)
