from events.domain.models import (
    Actor,
    Booking,
    BookingHistoryEntry,
    BookingStatus,
    Event,
    EventStatus,
    NewEvent,
    Role,
)
from events.domain.value_objects import BookingId, Capacity, EventId, Money, Quantity, UserId

__all__ = [
    "Actor",
    "Booking",
    "BookingHistoryEntry",
    "BookingStatus",
    "Event",
    "EventStatus",
    "NewEvent",
    "Role",
    "EventId",
    "BookingId",
    "UserId",
    "Money",
    "Capacity",
    "Quantity",
]
