from django import forms
from django.utils.translation import gettext_lazy as _


class UserProfileForm(forms.Form):
    bio = forms.CharField(
        label=_("About"),
        widget=forms.Textarea(attrs={"rows": 3}),
        help_text=_("A few sentences about yourself. This will appear on your personal url page."),
        error_messages={"required": _("Required")},
    )


class AvatarForm(forms.Form):
    avatar = forms.CharField(
        label=_("Avatar"),
        help_text=_("An image URL or data URI."),
    )
