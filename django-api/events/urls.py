from django.urls import path

from events.handlers import (
    EventBookingView,
    EventDetailView,
    EventListView,
    MyBookingsView,
    OrganizerEventsView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/bookings",
        EventBookingView.as_view(),
        name="event-bookings",
    ),
    path("bookings", MyBookingsView.as_view(), name="my-bookings"),
    path("organizer/events", OrganizerEventsView.as_view(), name="organizer-events"),
]
