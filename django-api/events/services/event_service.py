"""Event service - catalog, detail and organizer business logic.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from events.domain import Actor, Event, EventId, NewEvent
from events.domain.admission import EventSummary, summarize
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventDataError,
    InvalidEventIdError,
    NotAuthenticatedError,
    OrganizerRequiredError,
    PersistenceError,
)
from events.domain.roles import can_manage_events
from events.stores.interfaces import BookingStore, EventStore, StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventDetail:
    """An event with its booking aggregate."""

    event: Event
    summary: EventSummary


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def require_organizer(actor: Actor) -> None:
    if not actor.is_authenticated:
        raise NotAuthenticatedError()
    if not can_manage_events(actor.roles):
        raise OrganizerRequiredError()


def _matches(event: Event, search: str) -> bool:
    needle = search.casefold()
    return any(
        needle in (text or "").casefold()
        for text in (event.title, event.description, event.venue)
    )


class EventService:
    """Service for event catalog and organizer operations."""

    def __init__(self, event_store: EventStore, booking_store: BookingStore) -> None:
        self._events = event_store
        self._bookings = booking_store

    def list_upcoming_events(
        self, search: str | None = None, now: datetime | None = None
    ) -> list[EventDetail]:
        """Return active events that have not started yet, soonest first."""
        try:
            events = self._events.list_active_events(now or datetime.now(timezone.utc))
        except StoreError as exc:
            raise PersistenceError("list_events") from exc
        if search and search.strip():
            events = [event for event in events if _matches(event, search.strip())]
        return self._with_summaries(events)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        try:
            event = self._events.get_event(parsed)
        except StoreError as exc:
            raise PersistenceError("get_event") from exc
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_event_detail(self, event_id: str) -> EventDetail:
        """Return an event with its availability.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        try:
            quantities = self._bookings.get_confirmed_quantities(event.id)
        except StoreError:
            logger.exception("Could not read booking counts for event %s", event.id)
            return EventDetail(event=event, summary=EventSummary.unknown(event))
        return EventDetail(event=event, summary=summarize(event, quantities))

    def get_organizer_dashboard(self, actor: Actor) -> list[EventDetail]:
        """Return the organizer's events with booked count and revenue.

        Raises:
            NotAuthenticatedError: If the actor is anonymous.
            OrganizerRequiredError: If the actor is not an organizer or admin.
        """
        require_organizer(actor)
        try:
            events = self._events.list_events_for_organizer(actor.user_id)
        except StoreError as exc:
            raise PersistenceError("list_organizer_events") from exc
        return self._with_summaries(events)

    def create_event(self, actor: Actor, new_event: NewEvent) -> Event:
        """Create an event owned by the acting organizer.

        Raises:
            NotAuthenticatedError: If the actor is anonymous.
            OrganizerRequiredError: If the actor is not an organizer or admin.
            InvalidEventDataError: If a required field is blank.
            PersistenceError: If the store rejects the insert.
        """
        require_organizer(actor)
        for name in ("title", "venue"):
            if not getattr(new_event, name).strip():
                raise InvalidEventDataError(f"{name} is required")
        if new_event.capacity.value < 1:
            raise InvalidEventDataError("capacity must be at least 1")

        try:
            event = self._events.create_event(replace(new_event, organizer_id=actor.user_id))
        except StoreError as exc:
            raise PersistenceError("create_event") from exc
        logger.info("Organizer %s created event %s", actor.user_id, event.id)
        return event

    def _with_summaries(self, events: list[Event]) -> list[EventDetail]:
        if not events:
            return []
        try:
            quantities = self._bookings.get_confirmed_quantities_for_events(
                [event.id for event in events]
            )
        except StoreError:
            logger.exception("Could not read booking counts for %d events", len(events))
            return [EventDetail(event=event, summary=EventSummary.unknown(event)) for event in events]
        return [
            EventDetail(event=event, summary=summarize(event, quantities.get(event.id, [])))
            for event in events
        ]
