"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from events.domain.value_objects import BookingId, Capacity, EventId, Money, Quantity, UserId


class EventStatus(Enum):
    ACTIVE = "active"
    DRAFT = "draft"
    CANCELLED = "cancelled"


class BookingStatus(Enum):
    """Only CONFIRMED bookings consume capacity."""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"


class Role(Enum):
    ORGANIZER = "organizer"
    ADMIN = "admin"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    organizer_id: UserId
    title: str
    description: str
    venue: str
    starts_at: datetime
    ends_at: datetime | None
    price: Money
    capacity: Capacity
    image_url: str | None
    category: str | None
    status: EventStatus
    created_at: datetime


@dataclass(frozen=True)
class NewEvent:
    """Fields an organizer supplies when creating an event."""

    title: str
    description: str
    venue: str
    starts_at: datetime
    price: Money
    capacity: Capacity
    ends_at: datetime | None = None
    image_url: str | None = None
    category: str | None = None
    organizer_id: UserId | None = None


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    user_id: UserId
    quantity: Quantity
    total_price: Money
    status: BookingStatus
    booking_date: datetime


@dataclass(frozen=True)
class BookingHistoryEntry:
    """A booking together with the event details shown in a user's history."""

    booking: Booking
    event_title: str
    event_venue: str
    event_starts_at: datetime
    event_image_url: str | None


@dataclass(frozen=True)
class Actor:
    """The caller of a service operation.

    Identity and roles are passed explicitly so the domain never reads
    session state on its own.
    """

    user_id: UserId | None = None
    roles: frozenset[Role] = field(default_factory=frozenset)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> "Actor":
        return cls()
