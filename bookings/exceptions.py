from django.utils.translation import gettext_lazy as _


class BookingsError(Exception):
    """Base exception for booking errors"""

    default_message = ""

    def __init__(self, message: str | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)


class BookingNotFoundError(BookingsError):
    default_message = _("This booking has already been cancelled or does not exist.")


class BookingAlreadyCancelledError(BookingsError):
    default_message = _("This booking has already been cancelled.")


class CancellationInProgressError(BookingsError):
    default_message = _("This booking is already being cancelled. Please wait.")
