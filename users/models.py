from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils.translation import gettext_lazy as _

from common.models import BaseModel

from .managers import UserManager


class User(AbstractBaseUser, PermissionsMixin, BaseModel):
    email = models.EmailField(max_length=255, unique=True)
    username = models.SlugField(
        max_length=150,
        unique=True,
        null=True,
        blank=True,
        help_text=_("Public slug of the user's booking page."),
    )
    is_staff = models.BooleanField(
        default=False,
        help_text=_("Designates whether the user can log into this admin site."),
    )
    is_active = models.BooleanField(
        default=True,
        help_text=_(
            "Designates whether this user should be treated as "
            "active. Unselect this instead of deleting accounts."
        ),
    )

    objects: UserManager = UserManager()
    profile: "Profile"

    USERNAME_FIELD = "email"

    def get_full_name(self):
        return str(self.profile).strip()

    def get_short_name(self):
        return self.profile.first_name

    def __str__(self):
        return f"{self.profile} <{self.email}>"


class Profile(BaseModel):
    user = models.OneToOneField(
        User, on_delete=models.CASCADE, related_name="profile", primary_key=True
    )
    first_name = models.CharField(max_length=255, blank=True)
    last_name = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)
    # URL or data URI, uploads are handled outside of this project
    avatar = models.TextField(blank=True)
    brand_color = models.CharField(max_length=10, blank=True)
    dark_brand_color = models.CharField(max_length=10, blank=True)
    completed_onboarding = models.BooleanField(default=False)

    def __str__(self):
        return f"{self.first_name} {self.last_name}"
