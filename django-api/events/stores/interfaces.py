"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Backend failures are
raised as StoreError so services never depend on a database library.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from events.domain import Booking, BookingHistoryEntry, Event, EventId, NewEvent, Role, UserId


class StoreError(Exception):
    """Raised when the backing store cannot complete an operation."""


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_active_events(self, now: datetime) -> list[Event]:
        """Return active events starting at or after now, ordered by starts_at ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events_for_organizer(self, organizer_id: UserId) -> list[Event]:
        """Return an organizer's events ordered by starts_at descending."""
        ...

    @abstractmethod
    def create_event(self, new_event: NewEvent) -> Event:
        """Persist a new event and return it."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_confirmed_quantities(self, event_id: EventId) -> list[int]:
        """Return the quantity of every confirmed booking for an event."""
        ...

    @abstractmethod
    def get_confirmed_quantities_for_events(
        self, event_ids: Iterable[EventId]
    ) -> dict[EventId, list[int]]:
        """Return confirmed booking quantities keyed by event.

        Every requested event appears in the result, with an empty list when
        it has no confirmed bookings.
        """
        ...

    @abstractmethod
    def insert_booking(self, booking: Booking) -> Booking:
        """Persist a booking record and return it as stored."""
        ...

    @abstractmethod
    def list_bookings_for_user(self, user_id: UserId) -> list[BookingHistoryEntry]:
        """Return a user's bookings with event details, newest first."""
        ...


class RoleStore(ABC):
    """Interface for user role lookups."""

    @abstractmethod
    def get_roles(self, user_id: UserId) -> frozenset[Role]:
        """Return every role granted to a user."""
        ...

    def has_role(self, user_id: UserId, role: Role) -> bool:
        return role in self.get_roles(user_id)
