from events.services.booking_service import BookingService
from events.services.event_service import EventDetail, EventService

__all__ = ["BookingService", "EventDetail", "EventService"]
