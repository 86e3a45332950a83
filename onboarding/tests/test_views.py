from unittest.mock import Mock

from django.contrib.messages import get_messages
from django.urls import reverse

import pytest
from rest_framework import status

from event_types.models import EventType
from onboarding.constants import OnboardingState


@pytest.fixture
def logged_in_client(client, user, user_password):
    client.login(email=user.email, password=user_password)
    return client


@pytest.mark.django_db
class TestUserProfileStepView:
    @pytest.fixture(autouse=True)
    def step_url(self):
        self.url = reverse("onboarding:user-profile")

    def test_requires_login(self, client):
        response = client.get(self.url)

        assert response.status_code == status.HTTP_302_FOUND
        assert response["Location"].startswith(reverse("admin:login"))

    def test_get_renders_current_profile(self, logged_in_client, user):
        user.profile.bio = "Mathematician"
        user.profile.save()

        response = logged_in_client.get(self.url)

        assert response.status_code == status.HTTP_200_OK
        assert response.context["profile_form"].initial["bio"] == "Mathematician"

    def test_empty_bio_blocks_submission(self, logged_in_client, user):
        response = logged_in_client.post(self.url, {"bio": ""})

        assert response.status_code == status.HTTP_200_OK
        assert 'data-testid="required"' in response.content.decode()
        user.profile.refresh_from_db()
        assert user.profile.completed_onboarding is False
        assert not EventType.objects.filter(owner=user).exists()

    def test_bio_save_seeds_defaults_and_goes_home(self, logged_in_client, user):
        response = logged_in_client.post(self.url, {"bio": "Mathematician"})

        assert response.status_code == status.HTTP_302_FOUND
        assert response["Location"] == reverse("home")
        user.profile.refresh_from_db()
        assert user.profile.bio == "Mathematician"
        assert user.profile.completed_onboarding is True
        assert sorted(EventType.objects.filter(owner=user).values_list("slug", flat=True)) == [
            "15min",
            "30min",
            "secret",
        ]
        assert EventType.objects.get(owner=user, slug="secret").hidden is True

    def test_avatar_save_stays_on_step(self, logged_in_client, user):
        response = logged_in_client.post(
            self.url, {"action": "avatar", "avatar": "data:image/png;base64,AAAA"}
        )

        assert response.status_code == status.HTTP_302_FOUND
        assert response["Location"] == self.url
        assert [str(message) for message in get_messages(response.wsgi_request)] == [
            "Your user profile has been updated successfully."
        ]
        user.profile.refresh_from_db()
        assert user.profile.avatar == "data:image/png;base64,AAAA"
        assert user.profile.completed_onboarding is False
        assert not EventType.objects.filter(owner=user).exists()

    def test_update_failure_keeps_form(self, logged_in_client, di_container):
        mock_service = Mock()
        mock_service.submit_profile.return_value = OnboardingState.ERROR

        with di_container.onboarding_service.override(mock_service):
            response = logged_in_client.post(self.url, {"bio": "Mathematician"})

        assert response.status_code == status.HTTP_200_OK
        assert response.context["profile_form"].data["bio"] == "Mathematician"
        assert [str(message) for message in get_messages(response.wsgi_request)] == [
            "There was a problem saving your user profile."
        ]
