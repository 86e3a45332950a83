import datetime
from unittest.mock import Mock
from urllib.parse import parse_qs, urlparse

from django.core.cache import cache
from django.urls import reverse
from django.utils import timezone

import pytest
from model_bakery import baker
from rest_framework import status

from bookings.constants import BookingStatus
from bookings.factories import BookingFactory
from bookings.services.dataclasses import CancellationFailed, CancellationSucceeded
from event_types.factories import EventTypeFactory
from teams.models import Team


HOUR = datetime.timedelta(hours=1)


@pytest.fixture
def mock_cancellation_client(di_container):
    mock_client = Mock()
    mock_client.loading = False
    mock_client.cancel_booking.return_value = CancellationSucceeded(status_code=200)
    with di_container.booking_cancellation_client.override(mock_client):
        yield mock_client


def cancel_url(booking, **query):
    url = reverse("bookings:cancel", kwargs={"uid": booking.uid})
    if query:
        url += "?" + "&".join(f"{key}={value}" for key, value in query.items())
    return url


@pytest.mark.django_db
class TestCancelBookingPageView:
    def test_get_upcoming_booking(self, client, user):
        booking = BookingFactory.create_booking(user=user, title="Intro call")

        response = client.get(cancel_url(booking))

        assert response.status_code == status.HTTP_200_OK
        content = response.content.decode()
        assert "Really cancel your booking?" in content
        assert "Instead, you could also reschedule it." in content
        assert "Intro call" in content
        assert 'data-testid="cancel"' in content
        assert reverse("reschedule", kwargs={"uid": booking.uid}) in content
        assert response.context["page_data"].cancellation_allowed is True

    def test_get_with_directory_timezone_cookie(self, client, user):
        booking = BookingFactory.create_booking(user=user)
        client.cookies["timeOption.preferredTimeZone"] = "America"

        response = client.get(cancel_url(booking))

        assert response.status_code == status.HTTP_200_OK
        assert response.context["time_preferences"].timezone == "UTC"

    def test_get_missing_booking(self, client):
        response = client.get(reverse("bookings:cancel", kwargs={"uid": "missing"}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "This booking has already been cancelled or does not exist." in (
            response.content.decode()
        )
        assert 'data-testid="cancel"' not in response.content.decode()

    def test_get_past_booking_anonymous(self, client, user):
        booking = BookingFactory.create_booking(user=user, start_time=timezone.now() - HOUR)

        response = client.get(cancel_url(booking))

        content = response.content.decode()
        assert response.status_code == status.HTTP_200_OK
        assert "You cannot cancel this booking" in content
        assert "This event is in the past." in content
        assert 'data-testid="cancel"' not in content

    def test_get_past_booking_as_owner(self, client, user, user_password):
        booking = BookingFactory.create_booking(user=user, start_time=timezone.now() - HOUR)
        client.login(email=user.email, password=user_password)

        response = client.get(cancel_url(booking))

        assert response.context["page_data"].cancellation_allowed is True
        assert 'data-testid="cancel"' in response.content.decode()

    def test_get_all_remaining_recurring_bookings(self, client, user):
        event_type = EventTypeFactory.create_recurring_event_type(owner=user, count=4)
        booking, *_ = BookingFactory.create_recurring_series(
            user=user, event_type=event_type, occurrences=4
        )

        response = client.get(cancel_url(booking, allRemainingBookings="true"))

        content = response.content.decode()
        assert len(response.context["page_data"].recurring_instances) == 4
        assert len(response.context["more_instances"]) == 3
        assert "You are cancelling all remaining occurrences of this recurring event." in content
        assert "Every week for 4 occurrences" in content
        # recurring bookings are not rescheduled from here
        assert reverse("reschedule", kwargs={"uid": booking.uid}) not in content

    @pytest.mark.parametrize("flag", ["", "false", "yes", "%7Bbroken"])
    def test_get_without_valid_all_remaining_flag(self, client, user, flag):
        event_type = EventTypeFactory.create_recurring_event_type(owner=user)
        booking, *_ = BookingFactory.create_recurring_series(user=user, event_type=event_type)

        response = client.get(cancel_url(booking, allRemainingBookings=flag))

        assert response.status_code == status.HTTP_200_OK
        assert response.context["page_data"].recurring_instances is None
        assert "You are cancelling one occurrence of this recurring event." in (
            response.content.decode()
        )

    def test_post_success_redirects(self, client, user, mock_cancellation_client):
        team = baker.make(Team, name="Support", slug="support")
        event_type = EventTypeFactory.create_recurring_event_type(owner=user, team=team)
        booking, *_ = BookingFactory.create_recurring_series(
            user=user, event_type=event_type, title="Weekly sync"
        )

        response = client.post(
            cancel_url(booking, allRemainingBookings="true"),
            {"cancellation_reason": "Out of office"},
        )

        assert response.status_code == status.HTTP_302_FOUND
        location = urlparse(response["Location"])
        assert location.path == reverse("bookings:cancel-success")
        assert parse_qs(location.query) == {
            "name": ["Support"],
            "title": ["Weekly sync"],
            "eventPage": ["support"],
            "team": ["1"],
            "recurring": ["true"],
        }
        submitted = mock_cancellation_client.cancel_booking.call_args.args[0]
        assert submitted.uid == booking.uid
        assert submitted.cancellation_reason == "Out of office"
        assert submitted.all_remaining_bookings is True

    def test_post_single_booking_submits_without_remaining(
        self, client, user, mock_cancellation_client
    ):
        booking = BookingFactory.create_booking(user=user)

        response = client.post(cancel_url(booking), {"cancellation_reason": ""})

        assert response.status_code == status.HTTP_302_FOUND
        query = parse_qs(urlparse(response["Location"]).query)
        assert query["name"] == ["Ada Lovelace"]
        assert query["eventPage"] == [user.username]
        assert query["team"] == ["0"]
        assert query["recurring"] == ["false"]
        submitted = mock_cancellation_client.cancel_booking.call_args.args[0]
        assert submitted.all_remaining_bookings is False

    def test_post_failure_shows_status_code(self, client, user, mock_cancellation_client):
        mock_cancellation_client.cancel_booking.return_value = CancellationFailed(status_code=500)
        booking = BookingFactory.create_booking(user=user)

        response = client.post(cancel_url(booking), {"cancellation_reason": "Sick"})

        content = response.content.decode()
        assert response.status_code == status.HTTP_200_OK
        assert "An error with status code 500 occurred. Please try again." in content
        assert response.context["loading"] is False
        assert response.context["cancellation_reason"] == "Sick"
        assert 'data-testid="cancel"' in content

    def test_post_past_booking_anonymous(self, client, user, mock_cancellation_client):
        booking = BookingFactory.create_booking(user=user, start_time=timezone.now() - HOUR)

        response = client.post(cancel_url(booking), {"cancellation_reason": ""})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        mock_cancellation_client.cancel_booking.assert_not_called()

    def test_post_missing_booking(self, client, mock_cancellation_client):
        response = client.post(reverse("bookings:cancel", kwargs={"uid": "missing"}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        mock_cancellation_client.cancel_booking.assert_not_called()

    def test_post_while_cancellation_in_progress(self, client, user, mock_cancellation_client):
        booking = BookingFactory.create_booking(user=user)
        lock_key = f"booking-cancel:anonymous:{booking.uid}"
        cache.set(lock_key, True)

        try:
            response = client.post(cancel_url(booking), {"cancellation_reason": "Sick"})
        finally:
            cache.delete(lock_key)

        assert response.status_code == status.HTTP_409_CONFLICT
        mock_cancellation_client.cancel_booking.assert_not_called()

    def test_post_releases_lock(self, client, user, mock_cancellation_client):
        mock_cancellation_client.cancel_booking.return_value = CancellationFailed(status_code=503)
        booking = BookingFactory.create_booking(user=user)

        client.post(cancel_url(booking), {"cancellation_reason": ""})
        client.post(cancel_url(booking), {"cancellation_reason": ""})

        assert mock_cancellation_client.cancel_booking.call_count == 2


@pytest.mark.django_db
class TestCancelBookingSuccessView:
    def test_renders_cancelled_booking(self, client):
        response = client.get(
            reverse("bookings:cancel-success"),
            {
                "name": "Support",
                "title": "Weekly sync",
                "eventPage": "support",
                "team": "1",
                "recurring": "true",
            },
        )

        content = response.content.decode()
        assert response.status_code == status.HTTP_200_OK
        assert response.context["is_team"] is True
        assert response.context["is_recurring"] is True
        assert "All remaining occurrences were cancelled" in content
        assert 'href="/team/support"' in content

    def test_renders_without_parameters(self, client):
        response = client.get(reverse("bookings:cancel-success"))

        assert response.status_code == status.HTTP_200_OK
        assert response.context["is_team"] is False
        assert "This event is cancelled" in response.content.decode()


@pytest.mark.django_db
class TestCancelBookingAPIView:
    def test_cancel_booking(self, anonymous_client, user):
        booking = BookingFactory.create_booking(user=user)

        response = anonymous_client.delete(
            reverse("bookings:cancel-api"),
            {"uid": booking.uid, "cancellationReason": "Sick"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["cancelled"] == 1
        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation_reason == "Sick"

    def test_cancel_all_remaining_bookings(self, anonymous_client, user):
        past, booking, *upcoming = BookingFactory.create_recurring_series(
            user=user, first_start_time=timezone.now() - datetime.timedelta(days=1)
        )

        response = anonymous_client.delete(
            reverse("bookings:cancel-api"),
            {"uid": booking.uid, "cancellationReason": "", "allRemainingBookings": True},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["cancelled"] == 1 + len(upcoming)
        past.refresh_from_db()
        assert past.status == BookingStatus.ACCEPTED

    def test_cancel_missing_booking(self, anonymous_client):
        response = anonymous_client.delete(
            reverse("bookings:cancel-api"), {"uid": "missing"}, format="json"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "error" in response.data

    def test_cancel_already_cancelled_booking(self, anonymous_client, user):
        booking = BookingFactory.create_booking(user=user, status=BookingStatus.CANCELLED)

        response = anonymous_client.delete(
            reverse("bookings:cancel-api"), {"uid": booking.uid}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error"] == "This booking has already been cancelled."

    def test_cancel_without_uid(self, anonymous_client):
        response = anonymous_client.delete(reverse("bookings:cancel-api"), {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "uid" in response.data
