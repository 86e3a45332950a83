from unittest.mock import patch

from django.db import DatabaseError

import pytest

from users.constants import ProfileUpdateKind
from users.exceptions import EmptyProfileUpdateError, ProfileUpdateError
from users.models import Profile, User
from users.services import ProfileService, ProfileUpdateData


@pytest.mark.django_db
class TestProfileService:
    @pytest.fixture
    def profile_service(self):
        return ProfileService()

    def test_avatar_only_update(self, profile_service, user):
        result = profile_service.update_profile(
            user=user, data=ProfileUpdateData(avatar="https://example.com/ada.png")
        )

        assert result.kind == ProfileUpdateKind.AVATAR_SAVED
        assert result.profile.avatar == "https://example.com/ada.png"

    def test_bio_update(self, profile_service, user):
        result = profile_service.update_profile(
            user=user, data=ProfileUpdateData(bio="Mathematician", completed_onboarding=True)
        )

        assert result.kind == ProfileUpdateKind.PROFILE_SAVED
        profile = Profile.objects.get(pk=user.pk)
        assert profile.bio == "Mathematician"
        assert profile.completed_onboarding is True
        assert profile.first_name == "Ada"

    def test_avatar_with_bio_is_profile_save(self, profile_service, user):
        result = profile_service.update_profile(
            user=user, data=ProfileUpdateData(bio="Hi", avatar="https://example.com/ada.png")
        )

        assert result.kind == ProfileUpdateKind.PROFILE_SAVED

    def test_creates_missing_profile(self, profile_service):
        user = User.objects.create_user(email="noprofile@example.com", password="secret123")

        result = profile_service.update_profile(user=user, data=ProfileUpdateData(bio="Hi"))

        assert result.profile.user_id == user.pk
        assert Profile.objects.get(pk=user.pk).bio == "Hi"

    def test_empty_update(self, profile_service, user):
        with pytest.raises(EmptyProfileUpdateError):
            profile_service.update_profile(user=user, data=ProfileUpdateData())

    def test_database_error(self, profile_service, user):
        with patch.object(Profile, "save", side_effect=DatabaseError("down")):
            with pytest.raises(ProfileUpdateError):
                profile_service.update_profile(user=user, data=ProfileUpdateData(bio="Hi"))

        assert Profile.objects.get(pk=user.pk).bio == ""
