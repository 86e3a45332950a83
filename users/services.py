import dataclasses
import logging
from dataclasses import dataclass

from django.db import DatabaseError, transaction

from common.utils.serializer_utils import update_model_instance_from_dict
from users.constants import ProfileUpdateKind
from users.exceptions import EmptyProfileUpdateError, ProfileUpdateError
from users.models import Profile, User


logger = logging.getLogger(__name__)


@dataclass
class ProfileUpdateData:
    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    avatar: str | None = None
    brand_color: str | None = None
    dark_brand_color: str | None = None
    completed_onboarding: bool | None = None

    def changed_fields(self) -> dict:
        return {
            key: value for key, value in dataclasses.asdict(self).items() if value is not None
        }


@dataclass(frozen=True)
class ProfileUpdateResult:
    kind: ProfileUpdateKind
    profile: Profile


class ProfileService:
    def update_profile(self, user: User, data: ProfileUpdateData) -> ProfileUpdateResult:
        """
        Apply a partial update to the user's profile.
        :param user: Owner of the profile.
        :param data: Fields to change, `None` values are left untouched.
        :return: The saved profile tagged with `AVATAR_SAVED` when only the avatar changed,
            `PROFILE_SAVED` otherwise.
        """
        changes = data.changed_fields()
        if not changes:
            raise EmptyProfileUpdateError()

        try:
            with transaction.atomic():
                profile, _ = Profile.objects.select_for_update().get_or_create(user=user)
                update_model_instance_from_dict(profile, changes)
                profile.save(update_fields=[*changes.keys(), "modified"])
        except DatabaseError as e:
            logger.exception("Failed to update profile of user %s", user.pk)
            raise ProfileUpdateError() from e

        kind = (
            ProfileUpdateKind.AVATAR_SAVED
            if changes.keys() == {"avatar"}
            else ProfileUpdateKind.PROFILE_SAVED
        )
        return ProfileUpdateResult(kind=kind, profile=profile)
