from rest_framework.exceptions import ValidationError


class EventTypeError(Exception):
    """Base exception for event type errors"""

    default_message = ""

    def __init__(self, message: str | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)


class InvalidEventTypeLengthError(EventTypeError):
    default_message = "Event type length must be a positive number of minutes."


class DuplicateEventTypeSlugError(EventTypeError):
    default_message = "An event type with this slug already exists."


class EventTypeValidationError(ValidationError):
    default_detail = "Invalid event type."
    default_code = "invalid_event_type"
