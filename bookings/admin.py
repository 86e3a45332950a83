from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "uid", "title", "start_time", "status", "user", "event_type")
    list_filter = ("status",)
    search_fields = ("uid", "title", "user__email", "recurring_event_id")
    raw_id_fields = ("user", "event_type")
    readonly_fields = ("uid",)
