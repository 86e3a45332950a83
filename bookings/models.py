from django.conf import settings
from django.db import models

from bookings.constants import BookingStatus
from bookings.querysets import BookingQuerySet
from common.models import PublicUidModel


class Booking(PublicUidModel):
    """
    A booked meeting. Visitors reach it through its `uid` token, never through its id.
    """

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_time = models.DateTimeField(db_index=True)
    end_time = models.DateTimeField()
    status = models.CharField(
        max_length=20,
        choices=BookingStatus,
        default=BookingStatus.ACCEPTED,
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="bookings",
        null=True,
        blank=True,
    )
    event_type = models.ForeignKey(
        "event_types.EventType",
        on_delete=models.SET_NULL,
        related_name="bookings",
        null=True,
        blank=True,
    )
    recurring_event_id = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Shared by every booking of the same recurring series.",
    )
    cancellation_reason = models.TextField(blank=True)

    objects = BookingQuerySet.as_manager()

    def __str__(self):
        return f"{self.title} ({self.uid})"
