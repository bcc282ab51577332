"""Serializers for transforming domain models to API responses and parsing input."""

from decimal import Decimal

from rest_framework import serializers

from events.domain import Capacity, Money, NewEvent

MAX_CAPACITY = 1_000_000


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    venue = serializers.CharField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField(allow_null=True)
    price = serializers.CharField()
    price_label = serializers.SerializerMethodField()
    capacity = serializers.IntegerField(source="capacity.value")
    image_url = serializers.CharField(allow_null=True)
    category = serializers.CharField(allow_null=True)
    status = serializers.CharField(source="status.value")

    def get_price_label(self, event) -> str:
        return event.price.label()


class EventDetailSerializer(serializers.Serializer):
    """Serializer for an event with its public availability."""

    def to_representation(self, instance):
        data = EventSerializer(instance.event).data
        data["booked_count"] = instance.summary.booked_count
        data["available_seats"] = instance.summary.seats_left
        data["sold_out"] = instance.summary.is_sold_out
        return data


class OrganizerEventSerializer(serializers.Serializer):
    """Serializer for an organizer dashboard row."""

    def to_representation(self, instance):
        data = EventSerializer(instance.event).data
        data["booked_count"] = instance.summary.booked_count
        data["available_seats"] = instance.summary.seats_left
        data["revenue"] = str(instance.summary.revenue)
        return data


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField()
    event_id = serializers.CharField()
    quantity = serializers.IntegerField(source="quantity.value")
    total_price = serializers.CharField()
    status = serializers.CharField(source="status.value")
    booking_date = serializers.DateTimeField()


class BookedEventSerializer(serializers.Serializer):
    title = serializers.CharField(source="event_title")
    venue = serializers.CharField(source="event_venue")
    starts_at = serializers.DateTimeField(source="event_starts_at")
    image_url = serializers.CharField(source="event_image_url", allow_null=True)


class BookingHistorySerializer(serializers.Serializer):
    """Serializer for a booking in the user's history."""

    def to_representation(self, instance):
        data = BookingSerializer(instance.booking).data
        data["event"] = BookedEventSerializer(instance).data
        return data


class BookingRequestSerializer(serializers.Serializer):
    """Input for POST /api/events/{id}/bookings.

    Only the type is checked here; the admission rules decide whether the
    quantity is acceptable.
    """

    quantity = serializers.IntegerField(required=False, default=1)


class EventCreateSerializer(serializers.Serializer):
    """Input for POST /api/organizer/events."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    venue = serializers.CharField(max_length=255)
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField(required=False, allow_null=True, default=None)
    capacity = serializers.IntegerField(min_value=1, max_value=MAX_CAPACITY)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    image_url = serializers.URLField(required=False, allow_null=True, allow_blank=True, default=None)
    category = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=100, default=None
    )

    def to_new_event(self) -> NewEvent:
        data = self.validated_data
        return NewEvent(
            title=data["title"],
            description=data["description"],
            venue=data["venue"],
            starts_at=data["starts_at"],
            ends_at=data["ends_at"],
            price=Money(data["price"]),
            capacity=Capacity(data["capacity"]),
            image_url=data["image_url"] or None,
            category=data["category"] or None,
        )
