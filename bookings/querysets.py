import datetime

from django.db import models

from bookings.constants import INACTIVE_BOOKING_STATUSES


class BookingQuerySet(models.QuerySet):
    """
    Custom QuerySet for Booking model to handle specific queries.
    """

    def filter_active(self):
        """Exclude cancelled and rejected bookings."""
        return self.exclude(status__in=INACTIVE_BOOKING_STATUSES)

    def filter_starting_from(self, start_time: datetime.datetime):
        """Filter bookings that start at or after `start_time`."""
        return self.filter(start_time__gte=start_time)

    def filter_by_recurring_series(self, recurring_event_id: str):
        """Filter bookings that belong to the recurring series `recurring_event_id`."""
        return self.filter(recurring_event_id=recurring_event_id)

    def filter_remaining_in_series(
        self, recurring_event_id: str, now: datetime.datetime
    ) -> "BookingQuerySet":
        """
        Active bookings of a recurring series that did not start yet, earliest first.
        """
        return (
            self.filter_by_recurring_series(recurring_event_id)
            .filter_starting_from(now)
            .filter_active()
            .order_by("start_time", "id")
        )
