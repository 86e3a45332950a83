from typing import Annotated

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _
from django.views import View

from dependency_injector.wiring import Provide, inject

from common.exceptions import ServiceNotInjectedError
from onboarding.constants import OnboardingState
from onboarding.forms import AvatarForm, UserProfileForm
from onboarding.services import OnboardingService


class UserProfileStepView(LoginRequiredMixin, View):
    """
    The "user profile" step of getting started: a biography and an avatar.
    The avatar is saved on its own and keeps the user on this step.
    """

    template_name = "onboarding/user_profile.html"

    @inject
    def __init__(
        self,
        *args,
        onboarding_service: Annotated[
            "OnboardingService | None", Provide["onboarding_service"]
        ] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.onboarding_service = onboarding_service

    def get_initial(self, request) -> dict:
        profile = getattr(request.user, "profile", None)
        return {
            "bio": profile.bio if profile else "",
            "avatar": profile.avatar if profile else "",
        }

    def render_step(self, request, profile_form=None, avatar_form=None, status=200):
        initial = self.get_initial(request)
        context = {
            "profile_form": profile_form or UserProfileForm(initial={"bio": initial["bio"]}),
            "avatar_form": avatar_form or AvatarForm(initial={"avatar": initial["avatar"]}),
            "avatar": initial["avatar"],
        }
        return render(request, self.template_name, context, status=status)

    def get(self, request, *args, **kwargs):
        return self.render_step(request)

    def post(self, request, *args, **kwargs):
        if not self.onboarding_service:
            raise ServiceNotInjectedError("onboarding_service")

        if request.POST.get("action") == "avatar":
            avatar_form = AvatarForm(request.POST)
            if not avatar_form.is_valid():
                return self.render_step(request, avatar_form=avatar_form)
            state = self.onboarding_service.submit_avatar(
                request.user, avatar_form.cleaned_data["avatar"]
            )
            if state == OnboardingState.ERROR:
                messages.error(request, _("There was a problem saving your user profile."))
                return self.render_step(request, avatar_form=avatar_form)
            messages.success(request, _("Your user profile has been updated successfully."))
            return redirect("onboarding:user-profile")

        profile_form = UserProfileForm(request.POST)
        if not profile_form.is_valid():
            return self.render_step(request, profile_form=profile_form)

        state = self.onboarding_service.submit_profile(
            request.user, profile_form.cleaned_data["bio"]
        )
        if state == OnboardingState.ERROR:
            messages.error(request, _("There was a problem saving your user profile."))
            return self.render_step(request, profile_form=profile_form)
        return redirect("home")
