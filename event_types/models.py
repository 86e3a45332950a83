from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from common.models import BaseModel
from event_types.recurrence import RecurringEvent, parse_recurring_event


class EventType(BaseModel):
    """
    A template for bookable meeting slots.
    """

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_types",
        null=True,
        blank=True,
    )
    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.CASCADE,
        related_name="event_types",
        null=True,
        blank=True,
    )
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255)
    description = models.TextField(blank=True)
    length = models.PositiveIntegerField(
        validators=[MinValueValidator(1)], help_text="Duration in minutes."
    )
    hidden = models.BooleanField(default=False)
    recurring_event = models.JSONField(
        null=True,
        blank=True,
        help_text="Recurrence rule payload: freq, count, interval and optional dtstart/until/tzid.",
    )

    class Meta(BaseModel.Meta):
        constraints = [
            models.UniqueConstraint(fields=("owner", "slug"), name="unique_event_type_owner_slug"),
        ]

    def __str__(self):
        return f"{self.title} ({self.length} min)"

    @property
    def parsed_recurring_event(self) -> RecurringEvent | None:
        return parse_recurring_event(self.recurring_event)
