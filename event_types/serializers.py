from rest_framework import serializers

from common.utils.serializer_utils import VirtualModelSerializer
from event_types.recurrence import parse_recurring_event

from .models import EventType
from .virtual_models import EventTypeVirtualModel


class EventTypeSerializer(VirtualModelSerializer):
    team = serializers.IntegerField(source="team_id", read_only=True, allow_null=True)

    class Meta:  # type: ignore
        model = EventType
        virtual_model = EventTypeVirtualModel
        fields = (
            "id",
            "title",
            "slug",
            "description",
            "length",
            "hidden",
            "recurring_event",
            "team",
            "created",
            "modified",
        )
        read_only_fields = ("id", "created", "modified")
        # uniqueness is checked by the service against the authenticated owner
        validators: list = []  # noqa: RUF012

    def validate_recurring_event(self, value):
        if value and parse_recurring_event(value) is None:
            raise serializers.ValidationError(
                "Recurring event must have a supported `freq` and a positive `count`."
            )
        return value
