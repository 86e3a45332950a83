from collections.abc import Callable

from cuid2 import cuid_wrapper
from model_bakery import baker

from users.models import Profile, User


cuid_generator: Callable[[], str] = cuid_wrapper()


DEFAULT_TEST_USER_PASSWORD = "123456"  # noqa: S105

PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "bio",
    "avatar",
    "brand_color",
    "dark_brand_color",
    "completed_onboarding",
)


class UserFactory:
    def create_user(self, **kwargs) -> User:
        """
        Create a user with a profile. Profile fields such as `bio` or `brand_color` can be
        passed alongside the user fields.
        """
        try:
            return User.objects.get(email=kwargs.get("email", ""))
        except User.DoesNotExist:
            pass

        profile_fields = {key: kwargs.pop(key) for key in PROFILE_FIELDS if key in kwargs}

        unique_id = cuid_generator()
        user = baker.prepare(
            User,
            email=kwargs.get("email", f"user{unique_id}@example.com"),
            username=kwargs.get("username", f"user-{unique_id}"),
        )
        user.set_password(kwargs.get("password", DEFAULT_TEST_USER_PASSWORD))
        user.save()

        ProfileFactory().create_profile(user=user, **profile_fields)
        return user


class ProfileFactory:
    def create_profile(self, user, **kwargs) -> Profile:
        for field in PROFILE_FIELDS[:-1]:
            kwargs.setdefault(field, "")
        return baker.make(Profile, user=user, **kwargs)
