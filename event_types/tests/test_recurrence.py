import datetime

import pytest
from dateutil import rrule

from event_types.constants import RecurrenceFrequency
from event_types.recurrence import RecurringEvent, get_every_freq_for, parse_recurring_event


class TestParseRecurringEvent:
    @pytest.mark.parametrize("payload", [None, {}, "", []])
    def test_empty_payload_has_no_recurrence(self, payload):
        assert parse_recurring_event(payload) is None

    def test_parses_frequency_name(self):
        recurring_event = parse_recurring_event({"freq": "weekly", "count": 5, "interval": 2})

        assert recurring_event == RecurringEvent(
            freq=RecurrenceFrequency.WEEKLY, count=5, interval=2
        )

    def test_parses_rrule_frequency_constant(self):
        recurring_event = parse_recurring_event({"freq": rrule.MONTHLY, "count": 3})

        assert recurring_event.freq == RecurrenceFrequency.MONTHLY
        assert recurring_event.interval == 1

    def test_parses_optional_dates(self):
        recurring_event = parse_recurring_event(
            {
                "freq": "DAILY",
                "count": 2,
                "dtstart": "2026-01-05T10:00:00+00:00",
                "tzid": "America/Sao_Paulo",
            }
        )

        assert recurring_event.dtstart == datetime.datetime(2026, 1, 5, 10, tzinfo=datetime.UTC)
        assert recurring_event.until is None
        assert recurring_event.tzid == "America/Sao_Paulo"

    @pytest.mark.parametrize(
        "payload",
        [
            {"freq": "FORTNIGHTLY", "count": 2},
            {"freq": rrule.HOURLY, "count": 2},
            {"freq": "WEEKLY"},
            {"freq": "WEEKLY", "count": 0},
            {"freq": "WEEKLY", "count": "3"},
            {"freq": "WEEKLY", "count": True},
            {"freq": "WEEKLY", "count": 3, "dtstart": "not a date"},
            {"count": 3},
            "FREQ=WEEKLY;COUNT=3",
        ],
    )
    def test_malformed_payload_has_no_recurrence(self, payload, caplog):
        assert parse_recurring_event(payload) is None
        assert "Ignoring malformed recurring event payload" in caplog.text

    def test_round_trips_through_dict(self):
        recurring_event = RecurringEvent(freq=RecurrenceFrequency.YEARLY, count=2)

        assert parse_recurring_event(recurring_event.to_dict()) == recurring_event


class TestGetEveryFreqFor:
    def test_uses_rule_count(self):
        recurring_event = RecurringEvent(freq=RecurrenceFrequency.WEEKLY, count=5)

        assert get_every_freq_for(recurring_event) == "Every week for 5 occurrences"

    def test_prefers_remaining_count(self):
        recurring_event = RecurringEvent(freq=RecurrenceFrequency.DAILY, count=10)

        assert get_every_freq_for(recurring_event, recurring_count=1) == (
            "Every day for 1 occurrence"
        )
