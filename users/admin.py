from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.translation import gettext_lazy as _

from .models import Profile, User


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    fields = (
        "first_name",
        "last_name",
        "bio",
        "avatar",
        "brand_color",
        "dark_brand_color",
        "completed_onboarding",
    )


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ("id", "email", "username", "created", "modified")
    list_filter = ("is_active", "is_staff", "groups")
    search_fields = ("email", "username")
    ordering = ("email",)
    filter_horizontal = (
        "groups",
        "user_permissions",
    )
    inlines = (ProfileInline,)

    fieldsets = (
        (None, {"fields": ("email", "username", "password")}),
        (
            _("Permissions"),
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                )
            },
        ),
    )
    add_fieldsets = ((None, {"classes": ("wide",), "fields": ("email", "password1", "password2")}),)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("first_name", "last_name", "completed_onboarding")
    search_fields = ("first_name", "last_name", "user__email")
    list_filter = ("completed_onboarding", "user__is_active", "user__is_staff")
    fieldsets = (
        (_("Personal Info"), {"fields": ("first_name", "last_name", "bio", "avatar")}),
        (_("Branding"), {"fields": ("brand_color", "dark_brand_color")}),
        (_("Onboarding"), {"fields": ("completed_onboarding",)}),
    )
