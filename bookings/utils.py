from urllib.parse import urlencode

from django.urls import reverse
from django.utils.translation import gettext as _

from bookings.services.dataclasses import CancellationPageData


def get_cancellation_heading(page_data: CancellationPageData) -> str:
    if page_data.cancellation_allowed:
        return _("Really cancel your booking?")
    return _("You cannot cancel this booking")


def get_cancellation_subtext(page_data: CancellationPageData) -> str:
    if not page_data.booking.recurring_event:
        if page_data.cancellation_allowed:
            return _("Instead, you could also reschedule it.")
        return _("This event is in the past.")

    if page_data.cancels_all_remaining_bookings:
        return _("You are cancelling all remaining occurrences of this recurring event.")
    return _("You are cancelling one occurrence of this recurring event.")


def get_cancellation_error_message(status_code: int | None) -> str:
    if status_code is None:
        return _("Could not reach the server.") + " " + _("Please try again.")
    return (
        _("An error with status code %(status)s occurred.") % {"status": status_code}
        + " "
        + _("Please try again.")
    )


def build_cancel_success_url(page_data: CancellationPageData) -> str:
    """
    Success page URL carrying what it needs to describe the cancelled booking.
    """
    profile = page_data.profile
    query = urlencode(
        {
            "name": (profile.name if profile else None) or "",
            "title": page_data.booking.title,
            "eventPage": (profile.slug if profile else None) or "",
            "team": 1 if page_data.booking.is_team_event else 0,
            "recurring": "true" if page_data.cancels_all_remaining_bookings else "false",
        }
    )
    return f"{reverse('bookings:cancel-success')}?{query}"
