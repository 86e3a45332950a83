from django.db.models import TextChoices


class ProfileUpdateKind(TextChoices):
    AVATAR_SAVED = "avatar_saved", "Avatar Saved"
    PROFILE_SAVED = "profile_saved", "Profile Saved"
