from dataclasses import dataclass
from typing import Any

from django.db import IntegrityError, transaction

from event_types.exceptions import DuplicateEventTypeSlugError, InvalidEventTypeLengthError
from event_types.models import EventType
from users.models import User


@dataclass
class EventTypeInputData:
    title: str
    slug: str
    length: int
    hidden: bool = False
    description: str = ""
    recurring_event: dict[str, Any] | None = None


class EventTypeService:
    def user_has_event_types(self, owner: User) -> bool:
        return EventType.objects.filter(owner=owner).exists()

    def create_event_type(self, owner: User, data: EventTypeInputData) -> EventType:
        """
        Create an event type owned by `owner`.
        :param owner: User the event type belongs to.
        :param data: Event type fields.
        :return: Created EventType instance.
        """
        if data.length < 1:
            raise InvalidEventTypeLengthError()

        try:
            with transaction.atomic():
                return EventType.objects.create(
                    owner=owner,
                    title=data.title,
                    slug=data.slug,
                    length=data.length,
                    hidden=data.hidden,
                    description=data.description,
                    recurring_event=data.recurring_event,
                )
        except IntegrityError as e:
            raise DuplicateEventTypeSlugError() from e
