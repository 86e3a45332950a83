from django.urls import reverse

import pytest
from rest_framework import status

from users.factories import UserFactory


@pytest.mark.django_db
class TestProfileViewSet:
    """Test suite for the ProfileViewSet."""

    def test_success_get_profile_authenticated_me(self, auth_client, user):
        """Test retrieving authenticated user's profile."""
        url = reverse("api:Profile-detail", kwargs={"pk": "me"})
        response = auth_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == user.profile.pk
        assert response.data["first_name"] == "Ada"
        assert response.data["last_name"] == "Lovelace"
        assert response.data["completed_onboarding"] is False

    def test_failure_get_profile_unauthenticated_me(self, anonymous_client):
        """Test retrieving profile without authentication should fail."""
        url = reverse("api:Profile-detail", kwargs={"pk": "me"})
        response = anonymous_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_success_get_profile_authenticated_other_user(self, auth_client, user):
        other_user = UserFactory().create_user(email="otheruser@example.com", bio="Hello")

        url = reverse("api:Profile-detail", kwargs={"pk": other_user.profile.pk})
        response = auth_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == other_user.profile.pk
        assert response.data["bio"] == "Hello"

    def test_success_update_profile_me(self, auth_client, user, profile_data):
        url = reverse("api:Profile-detail", kwargs={"pk": "me"})
        response = auth_client.patch(url, profile_data, format="json")

        assert response.status_code == status.HTTP_200_OK

        user.profile.refresh_from_db()
        assert user.profile.first_name == profile_data["first_name"]
        assert user.profile.bio == profile_data["bio"]
        assert user.profile.brand_color == profile_data["brand_color"]
        assert response.data["last_name"] == profile_data["last_name"]

    def test_success_partial_update_keeps_other_fields(self, auth_client, user):
        url = reverse("api:Profile-detail", kwargs={"pk": "me"})

        response = auth_client.patch(url, {"bio": "Mathematician"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        user.profile.refresh_from_db()
        assert user.profile.bio == "Mathematician"
        assert user.profile.first_name == "Ada"
        assert response.data["last_name"] == "Lovelace"

    def test_success_complete_onboarding(self, auth_client, user):
        url = reverse("api:Profile-detail", kwargs={"pk": "me"})

        response = auth_client.patch(url, {"completed_onboarding": True}, format="json")

        assert response.status_code == status.HTTP_200_OK
        user.profile.refresh_from_db()
        assert user.profile.completed_onboarding is True

    def test_failure_empty_update(self, auth_client, user):
        url = reverse("api:Profile-detail", kwargs={"pk": "me"})

        response = auth_client.patch(url, {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "non_field_errors" in response.data

    def test_failure_profile_update_other_user(self, auth_client):
        """Test other user trying to update profile should fail."""
        other_user = UserFactory().create_user(email="otheruser@example.com")

        url = reverse("api:Profile-detail", kwargs={"pk": other_user.profile.pk})
        response = auth_client.patch(url, {"first_name": "Intruder"}, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        other_user.profile.refresh_from_db()
        assert other_user.profile.first_name == ""
