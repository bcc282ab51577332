"""Booking admission rules.

Pure functions over domain models: no I/O, no clock reads unless the caller
omits a timestamp. Services read events and confirmed booking quantities
through the stores and hand them in here.

Read-validate-insert is not atomic. Two requests validated against the same
availability reading can both be accepted and overbook the event; strict
oversell prevention needs a conditional write at the store.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from events.domain.models import Booking, BookingStatus, Event
from events.domain.value_objects import BookingId, Money, Quantity, UserId


class RejectionReason(Enum):
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"


@dataclass(frozen=True)
class Decision:
    """Outcome of an admission check."""

    accepted: bool
    reason: RejectionReason | None = None
    available_seats: int | None = None

    @classmethod
    def accept(cls) -> "Decision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason, available_seats: int | None = None) -> "Decision":
        return cls(accepted=False, reason=reason, available_seats=available_seats)


@dataclass(frozen=True)
class EventSummary:
    """Booked count, availability and revenue for one event.

    booked_count + available_seats == capacity always holds, so a negative
    available_seats means the event was oversold earlier. Use seats_left
    for display.
    """

    booked_count: int
    available_seats: int
    revenue: Money
    degraded: bool = False

    @property
    def seats_left(self) -> int:
        return seats_left(self.available_seats)

    @property
    def is_sold_out(self) -> bool:
        return self.available_seats <= 0

    @classmethod
    def unknown(cls, event: Event) -> "EventSummary":
        """Zero aggregate used when booking data could not be read."""
        return cls(
            booked_count=0,
            available_seats=event.capacity.value,
            revenue=Money.zero(),
            degraded=True,
        )


def booked_count(confirmed_quantities: Iterable[int]) -> int:
    total = 0
    for quantity in confirmed_quantities:
        if quantity < 0:
            raise ValueError("Booking quantities cannot be negative")
        total += quantity
    return total


def compute_availability(event: Event, confirmed_quantities: Iterable[int]) -> int:
    """Return capacity minus the sum of confirmed booking quantities.

    The result can be negative if the event is already oversold; callers
    treat anything <= 0 as no seats remaining.
    """
    return event.capacity.value - booked_count(confirmed_quantities)


def seats_left(available_seats: int) -> int:
    return max(available_seats, 0)


def validate_booking_request(
    event: Event,
    available_seats: int,
    requested_quantity: int,
    is_authenticated: bool,
) -> Decision:
    """Decide whether a booking of requested_quantity tickets is admitted.

    Authentication is checked before quantity or capacity.

    Raises:
        ValueError: If requested_quantity is not an integer >= 1.
    """
    if not is_authenticated:
        return Decision.reject(RejectionReason.NOT_AUTHENTICATED)

    quantity = Quantity(requested_quantity)
    if quantity.value > available_seats:
        return Decision.reject(
            RejectionReason.INSUFFICIENT_CAPACITY,
            available_seats=seats_left(available_seats),
        )
    return Decision.accept()


def build_booking_record(
    event: Event,
    user_id: UserId,
    requested_quantity: int,
    booked_at: datetime | None = None,
) -> Booking:
    """Build the confirmed booking for an admitted request."""
    quantity = Quantity(requested_quantity)
    return Booking(
        id=BookingId(uuid4()),
        event_id=event.id,
        user_id=user_id,
        quantity=quantity,
        total_price=event.price.times(quantity.value),
        status=BookingStatus.CONFIRMED,
        booking_date=booked_at or datetime.now(timezone.utc),
    )


def summarize(event: Event, confirmed_quantities: Iterable[int]) -> EventSummary:
    count = booked_count(confirmed_quantities)
    return EventSummary(
        booked_count=count,
        available_seats=event.capacity.value - count,
        revenue=event.price.times(count),
    )
