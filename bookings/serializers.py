import json

from rest_framework import serializers

from bookings.services.dataclasses import CancelBookingInputData


class JSONBooleanField(serializers.Field):
    """
    Reads a JSON-encoded boolean from a query string value.
    Only the literal `true` is truthy, anything else (including malformed JSON) is `False`.
    """

    def to_internal_value(self, data):
        try:
            return json.loads(data) is True
        except (TypeError, ValueError):
            return False

    def to_representation(self, value):
        return json.dumps(bool(value))


class CancelPageQuerySerializer(serializers.Serializer):
    allRemainingBookings = JSONBooleanField(  # noqa: N815
        source="all_remaining_bookings", required=False, default=False
    )


class CancelBookingSerializer(serializers.Serializer):
    uid = serializers.CharField(max_length=64)
    cancellationReason = serializers.CharField(  # noqa: N815
        source="cancellation_reason", required=False, allow_blank=True, default=""
    )
    allRemainingBookings = serializers.BooleanField(  # noqa: N815
        source="all_remaining_bookings", required=False, default=False
    )

    def to_input_data(self) -> CancelBookingInputData:
        return CancelBookingInputData(**self.validated_data)
