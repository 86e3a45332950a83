from django.db.models import TextChoices


class BookingStatus(TextChoices):
    ACCEPTED = "accepted", "Accepted"
    PENDING = "pending", "Pending"
    CANCELLED = "cancelled", "Cancelled"
    REJECTED = "rejected", "Rejected"


# Bookings in these states are no longer part of a recurring series
INACTIVE_BOOKING_STATUSES = (BookingStatus.CANCELLED, BookingStatus.REJECTED)
