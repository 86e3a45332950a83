"""Recurrence rules attached to event types.

Event types store their recurrence as a free-form JSON payload. ``parse_recurring_event``
turns that payload into a ``RecurringEvent`` and degrades to ``None`` whenever the
payload is missing or malformed, so a bad rule hides the recurrence instead of
breaking the pages that render it.
"""

import datetime
import logging
from dataclasses import dataclass
from typing import Any

from django.utils.translation import ngettext

from dateutil import parser as dateutil_parser

from event_types.constants import (
    RECURRENCE_FREQUENCY_UNITS,
    RRULE_FREQUENCY_TO_RECURRENCE_FREQUENCY,
    RecurrenceFrequency,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurringEvent:
    freq: RecurrenceFrequency
    count: int
    interval: int = 1
    dtstart: datetime.datetime | None = None
    until: datetime.datetime | None = None
    tzid: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "freq": self.freq.value,
            "count": self.count,
            "interval": self.interval,
            "dtstart": self.dtstart.isoformat() if self.dtstart else None,
            "until": self.until.isoformat() if self.until else None,
            "tzid": self.tzid,
        }


class InvalidRecurringEventError(ValueError):
    pass


def _parse_frequency(value: Any) -> RecurrenceFrequency:
    if isinstance(value, bool):
        raise InvalidRecurringEventError(f"Invalid frequency: {value!r}")
    if isinstance(value, int):
        try:
            return RRULE_FREQUENCY_TO_RECURRENCE_FREQUENCY[value]
        except KeyError as e:
            raise InvalidRecurringEventError(f"Unsupported frequency: {value!r}") from e
    if isinstance(value, str):
        try:
            return RecurrenceFrequency(value.upper())
        except ValueError as e:
            raise InvalidRecurringEventError(f"Unsupported frequency: {value!r}") from e
    raise InvalidRecurringEventError(f"Invalid frequency: {value!r}")


def _parse_positive_int(payload: dict, key: str, default: int | None = None) -> int:
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidRecurringEventError(f"`{key}` must be a positive integer, got {value!r}")
    return value


def _parse_optional_datetime(payload: dict, key: str) -> datetime.datetime | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value
    if not isinstance(value, str):
        raise InvalidRecurringEventError(f"`{key}` must be an ISO 8601 string, got {value!r}")
    try:
        return dateutil_parser.isoparse(value)
    except ValueError as e:
        raise InvalidRecurringEventError(f"`{key}` is not a valid datetime: {value!r}") from e


def _build_recurring_event(payload: dict) -> RecurringEvent:
    tzid = payload.get("tzid")
    if tzid is not None and not isinstance(tzid, str):
        raise InvalidRecurringEventError(f"`tzid` must be a string, got {tzid!r}")

    return RecurringEvent(
        freq=_parse_frequency(payload.get("freq")),
        count=_parse_positive_int(payload, "count"),
        interval=_parse_positive_int(payload, "interval", default=1),
        dtstart=_parse_optional_datetime(payload, "dtstart"),
        until=_parse_optional_datetime(payload, "until"),
        tzid=tzid,
    )


def parse_recurring_event(payload: Any) -> RecurringEvent | None:
    """
    Parse a stored recurrence payload.
    :param payload: The JSON value stored in ``EventType.recurring_event``.
    :return: The structured rule, or ``None`` for an empty or malformed payload.
    """
    if not payload:
        return None
    if isinstance(payload, RecurringEvent):
        return payload
    if not isinstance(payload, dict):
        logger.warning("Ignoring malformed recurring event payload: %r", payload)
        return None

    try:
        return _build_recurring_event(payload)
    except InvalidRecurringEventError as e:
        logger.warning("Ignoring malformed recurring event payload: %s", e)
        return None


def get_every_freq_for(recurring_event: RecurringEvent, recurring_count: int | None = None) -> str:
    """Human readable summary such as "Every week for 5 occurrences"."""
    count = recurring_count or recurring_event.count
    return ngettext(
        "Every %(freq)s for %(count)d occurrence",
        "Every %(freq)s for %(count)d occurrences",
        count,
    ) % {"freq": RECURRENCE_FREQUENCY_UNITS[recurring_event.freq], "count": count}
