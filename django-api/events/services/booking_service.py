"""Booking service - runs the admission check and records bookings."""

import logging

from events.domain import Actor, Booking, BookingHistoryEntry
from events.domain.admission import (
    RejectionReason,
    build_booking_record,
    compute_availability,
    validate_booking_request,
)
from events.domain.errors import (
    InsufficientCapacityError,
    InvalidQuantityError,
    NotAuthenticatedError,
    PersistenceError,
)
from events.services.event_service import EventService
from events.stores.interfaces import BookingStore, EventStore, StoreError

logger = logging.getLogger(__name__)


class BookingService:
    """Service for ticket bookings."""

    def __init__(self, event_store: EventStore, booking_store: BookingStore) -> None:
        self._events = EventService(event_store, booking_store)
        self._bookings = booking_store

    def book_tickets(self, actor: Actor, event_id: str, quantity: int) -> Booking:
        """Book quantity tickets for the actor.

        Availability is read fresh from the store for every request. The
        read and the insert are not atomic, so concurrent requests can
        still overbook an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotAuthenticatedError: If the actor is anonymous.
            InvalidQuantityError: If quantity is not a whole number >= 1.
            InsufficientCapacityError: If fewer seats remain than requested.
            PersistenceError: If availability cannot be read or the insert fails.
        """
        event = self._events.get_event(event_id)
        try:
            quantities = self._bookings.get_confirmed_quantities(event.id)
        except StoreError as exc:
            raise PersistenceError("read_availability") from exc
        available = compute_availability(event, quantities)

        try:
            decision = validate_booking_request(
                event, available, quantity, is_authenticated=actor.is_authenticated
            )
        except ValueError as exc:
            raise InvalidQuantityError() from exc

        if decision.reason is RejectionReason.NOT_AUTHENTICATED:
            raise NotAuthenticatedError()
        if decision.reason is RejectionReason.INSUFFICIENT_CAPACITY:
            logger.info(
                "Rejected booking of %s tickets for event %s: %s available",
                quantity,
                event.id,
                decision.available_seats,
            )
            raise InsufficientCapacityError(decision.available_seats)

        booking = build_booking_record(event, actor.user_id, quantity)
        try:
            saved = self._bookings.insert_booking(booking)
        except StoreError as exc:
            logger.error("Booking %s for event %s was not saved", booking.id, event.id)
            raise PersistenceError("insert_booking") from exc
        logger.info(
            "User %s booked %s tickets for event %s (total %s)",
            actor.user_id,
            saved.quantity.value,
            event.id,
            saved.total_price,
        )
        return saved

    def list_bookings(self, actor: Actor) -> list[BookingHistoryEntry]:
        """Return the actor's bookings, newest first.

        Raises:
            NotAuthenticatedError: If the actor is anonymous.
        """
        if not actor.is_authenticated:
            raise NotAuthenticatedError()
        try:
            return self._bookings.list_bookings_for_user(actor.user_id)
        except StoreError as exc:
            raise PersistenceError("list_bookings") from exc
