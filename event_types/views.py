from typing import Annotated

from dependency_injector.wiring import Provide, inject
from rest_framework.permissions import IsAuthenticated

from common.exceptions import ServiceNotInjectedError
from common.utils.view_utils import CreateAndReadScheduleWebModelViewSet
from event_types.exceptions import EventTypeError, EventTypeValidationError
from event_types.models import EventType
from event_types.serializers import EventTypeSerializer
from event_types.services import EventTypeInputData, EventTypeService


class EventTypeViewSet(CreateAndReadScheduleWebModelViewSet):
    """
    A viewset for listing and creating the authenticated user's event types.
    """

    queryset = EventType.objects.all()
    serializer_class = EventTypeSerializer
    permission_classes = (IsAuthenticated,)

    @inject
    def __init__(
        self,
        *args,
        event_type_service: Annotated[
            "EventTypeService | None", Provide["event_type_service"]
        ] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.event_type_service = event_type_service

    def get_queryset(self):
        return super().get_queryset().filter(owner=self.request.user).order_by("id")

    def perform_create(self, serializer):
        if not self.event_type_service:
            raise ServiceNotInjectedError("event_type_service")

        try:
            serializer.instance = self.event_type_service.create_event_type(
                owner=self.request.user,
                data=EventTypeInputData(**serializer.validated_data),
            )
        except EventTypeError as e:
            raise EventTypeValidationError({"non_field_errors": [str(e)]}) from e
