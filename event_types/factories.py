from model_bakery import baker

from event_types.constants import RecurrenceFrequency
from event_types.models import EventType


class EventTypeFactory:
    @staticmethod
    def create_event_type(
        owner=None,
        team=None,
        title="30 Min Meeting",
        slug="30min",
        length=30,
        hidden=False,
        recurring_event=None,
        **kwargs,
    ) -> EventType:
        return baker.make(
            EventType,
            owner=owner,
            team=team,
            title=title,
            slug=slug,
            length=length,
            hidden=hidden,
            recurring_event=recurring_event,
            **kwargs,
        )

    @staticmethod
    def create_recurring_event_type(
        owner=None,
        team=None,
        frequency: str = RecurrenceFrequency.WEEKLY,
        count: int = 4,
        interval: int = 1,
        **kwargs,
    ) -> EventType:
        """
        Create an event type whose bookings repeat `count` times every `interval` `frequency`.
        """
        return EventTypeFactory.create_event_type(
            owner=owner,
            team=team,
            recurring_event={"freq": str(frequency), "count": count, "interval": interval},
            **kwargs,
        )
