from unittest.mock import Mock

import pytest

from event_types.exceptions import DuplicateEventTypeSlugError
from event_types.models import EventType
from event_types.tasks import create_event_type_task


@pytest.mark.django_db
class TestCreateEventTypeTask:
    def test_creates_event_type(self, user):
        event_type_id = create_event_type_task.delay(
            owner_id=user.pk, title="15 Min Meeting", slug="15min", length=15
        ).get()

        event_type = EventType.objects.get(pk=event_type_id)
        assert event_type.owner == user
        assert event_type.hidden is False

    def test_skips_missing_user(self, di_container):
        mock_service = Mock()

        with di_container.event_type_service.override(mock_service):
            result = create_event_type_task.delay(
                owner_id=0, title="15 Min Meeting", slug="15min", length=15
            ).get()

        assert result is None
        mock_service.create_event_type.assert_not_called()

    def test_creation_failure_is_logged_and_skipped(self, user, di_container, caplog):
        mock_service = Mock()
        mock_service.create_event_type.side_effect = DuplicateEventTypeSlugError()

        with di_container.event_type_service.override(mock_service):
            result = create_event_type_task.delay(
                owner_id=user.pk, title="15 Min Meeting", slug="15min", length=15
            ).get()

        assert result is None
        assert "Failed to create event type 15min" in caplog.text
        assert not EventType.objects.filter(owner=user).exists()
