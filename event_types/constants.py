from django.db.models import TextChoices
from django.utils.translation import gettext_lazy as _

from dateutil import rrule


class RecurrenceFrequency(TextChoices):
    DAILY = "DAILY", "Daily"
    WEEKLY = "WEEKLY", "Weekly"
    MONTHLY = "MONTHLY", "Monthly"
    YEARLY = "YEARLY", "Yearly"


# Recurrence payloads may store the frequency as an RFC 5545 / dateutil constant
RRULE_FREQUENCY_TO_RECURRENCE_FREQUENCY = {
    rrule.DAILY: RecurrenceFrequency.DAILY,
    rrule.WEEKLY: RecurrenceFrequency.WEEKLY,
    rrule.MONTHLY: RecurrenceFrequency.MONTHLY,
    rrule.YEARLY: RecurrenceFrequency.YEARLY,
}

RECURRENCE_FREQUENCY_UNITS = {
    RecurrenceFrequency.DAILY: _("day"),
    RecurrenceFrequency.WEEKLY: _("week"),
    RecurrenceFrequency.MONTHLY: _("month"),
    RecurrenceFrequency.YEARLY: _("year"),
}

# Event types provisioned for users finishing onboarding without any of their own
DEFAULT_EVENT_TYPES = (
    {"title": _("15 Min Meeting"), "slug": "15min", "length": 15},
    {"title": _("30 Min Meeting"), "slug": "30min", "length": 30},
    {"title": _("Secret Meeting"), "slug": "secret", "length": 15, "hidden": True},
)
