from django.contrib import admin

from events.models import Booking, Event, UserRole


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    fields = ["user", "quantity", "total_price", "status", "booking_date"]
    readonly_fields = ["total_price", "booking_date"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "venue", "starts_at", "price", "capacity", "status"]
    list_filter = ["status", "category"]
    search_fields = ["title", "venue"]
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "quantity", "total_price", "status", "booking_date"]
    list_filter = ["status", "event"]


@admin.register(UserRole)
class UserRoleAdmin(admin.ModelAdmin):
    list_display = ["user", "role"]
    list_filter = ["role"]
