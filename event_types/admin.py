from django.contrib import admin

from .models import EventType


@admin.register(EventType)
class EventTypeAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "slug", "length", "hidden", "owner", "team")
    list_filter = ("hidden",)
    search_fields = ("title", "slug", "owner__email", "team__name")
    raw_id_fields = ("owner", "team")
