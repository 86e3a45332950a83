import logging
from typing import TYPE_CHECKING, Annotated

from dependency_injector.wiring import Provide, inject

from event_types.exceptions import EventTypeError
from event_types.services import EventTypeInputData
from schedule_web.celery import app
from users.models import User


if TYPE_CHECKING:
    from event_types.services import EventTypeService


logger = logging.getLogger(__name__)


@app.task
@inject
def create_event_type_task(
    owner_id: int,
    title: str,
    slug: str,
    length: int,
    hidden: bool = False,
    event_type_service: Annotated["EventTypeService | None", Provide["event_type_service"]] = None,
) -> int | None:
    if not event_type_service:
        return None

    owner = User.objects.filter(id=owner_id).first()
    if not owner:
        logger.warning("Skipping event type %s creation, user %s not found", slug, owner_id)
        return None

    try:
        event_type = event_type_service.create_event_type(
            owner=owner,
            data=EventTypeInputData(title=title, slug=slug, length=length, hidden=hidden),
        )
    except EventTypeError:
        logger.exception("Failed to create event type %s for user %s", slug, owner_id)
        return None
    return event_type.pk
