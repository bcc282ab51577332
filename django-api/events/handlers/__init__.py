from events.handlers.views import (
    EventBookingView,
    EventDetailView,
    EventListView,
    MyBookingsView,
    OrganizerEventsView,
)

__all__ = [
    "EventBookingView",
    "EventDetailView",
    "EventListView",
    "MyBookingsView",
    "OrganizerEventsView",
]
