"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.core.cache import cache
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.pagination import PageNumberPagination
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import EVENT_LIST_KEY, cache_ttl, event_detail_key, event_list_ttl
from events.domain import Actor, UserId
from events.domain.errors import DomainError, ErrorCode, InsufficientCapacityError
from events.handlers.serializers import (
    BookingHistorySerializer,
    BookingRequestSerializer,
    BookingSerializer,
    EventCreateSerializer,
    EventDetailSerializer,
    EventSerializer,
    OrganizerEventSerializer,
)
from events.services import BookingService, EventService
from events.services.event_service import parse_event_id, require_organizer
from events.stores.django_store import DjangoBookingStore, DjangoEventStore, DjangoRoleStore
from events.stores.interfaces import StoreError

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ORGANIZER_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INSUFFICIENT_CAPACITY: status.HTTP_409_CONFLICT,
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, InsufficientCapacityError):
        body["available"] = error.available
    return Response({"error": body}, status=ERROR_STATUS[error.code])


def validation_error_response(errors) -> Response:
    return Response(
        {"error": {"code": "VALIDATION_ERROR", "message": "Invalid request", "fields": errors}},
        status=status.HTTP_400_BAD_REQUEST,
    )


def page_not_found_response(exc: NotFound) -> Response:
    return Response(
        {"error": {"code": "PAGE_NOT_FOUND", "message": str(exc.detail)}},
        status=status.HTTP_404_NOT_FOUND,
    )


def event_service() -> EventService:
    return EventService(DjangoEventStore(), DjangoBookingStore())


def booking_service() -> BookingService:
    return BookingService(DjangoEventStore(), DjangoBookingStore())


def actor_from_request(request: Request) -> Actor:
    """Build the explicit caller context from the authenticated request user."""
    user = request.user
    if user is None or not user.is_authenticated:
        return Actor.anonymous()
    user_id = UserId(user.pk)
    try:
        roles = DjangoRoleStore().get_roles(user_id)
    except StoreError:
        logger.exception("Could not load roles for user %s", user_id)
        roles = frozenset()
    return Actor(user_id=user_id, roles=roles)


class EventPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        search = request.query_params.get("search", "").strip()
        data = None if search else cache.get(EVENT_LIST_KEY)
        if data is None:
            now = timezone.now()
            try:
                details = event_service().list_upcoming_events(search=search or None, now=now)
            except DomainError as exc:
                return error_response(exc)
            data = list(EventDetailSerializer(details, many=True).data)
            next_start = details[0].event.starts_at if details else None
            ttl = event_list_ttl(next_start, now)
            if not search and ttl and not any(detail.summary.degraded for detail in details):
                cache.set(EVENT_LIST_KEY, data, ttl)

        paginator = EventPagination()
        try:
            page = paginator.paginate_queryset(data, request, view=self)
        except NotFound as exc:
            return page_not_found_response(exc)
        return paginator.get_paginated_response(page)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            key = event_detail_key(parse_event_id(event_id))
        except DomainError as exc:
            return error_response(exc)

        data = cache.get(key)
        if data is None:
            try:
                detail = event_service().get_event_detail(event_id)
            except DomainError as exc:
                return error_response(exc)
            data = EventDetailSerializer(detail).data
            if not detail.summary.degraded:
                cache.set(key, data, cache_ttl())
        return Response(data)


class EventBookingView(APIView):
    """Handler for POST /api/events/{event_id}/bookings"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            booking = booking_service().book_tickets(
                actor_from_request(request),
                event_id,
                serializer.validated_data["quantity"],
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class MyBookingsView(APIView):
    """Handler for GET /api/bookings"""

    def get(self, request: Request) -> Response:
        try:
            entries = booking_service().list_bookings(actor_from_request(request))
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingHistorySerializer(entries, many=True).data)


class OrganizerEventsView(APIView):
    """Handler for GET and POST /api/organizer/events"""

    def get(self, request: Request) -> Response:
        try:
            rows = event_service().get_organizer_dashboard(actor_from_request(request))
        except DomainError as exc:
            return error_response(exc)
        return Response(OrganizerEventSerializer(rows, many=True).data)

    def post(self, request: Request) -> Response:
        actor = actor_from_request(request)
        try:
            require_organizer(actor)
        except DomainError as exc:
            return error_response(exc)

        serializer = EventCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            event = event_service().create_event(actor, serializer.to_new_event())
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)
