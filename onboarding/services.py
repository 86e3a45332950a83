import logging

from celery import group

from event_types.constants import DEFAULT_EVENT_TYPES
from event_types.services import EventTypeService
from event_types.tasks import create_event_type_task
from onboarding.constants import OnboardingState
from onboarding.state_machine import OnboardingStateMachine
from users.constants import ProfileUpdateKind
from users.exceptions import ProfileUpdateError
from users.models import User
from users.services import ProfileService, ProfileUpdateData, ProfileUpdateResult


logger = logging.getLogger(__name__)


class OnboardingService:
    def __init__(self, profile_service: ProfileService, event_type_service: EventTypeService):
        self.profile_service = profile_service
        self.event_type_service = event_type_service

    def submit_profile(self, user: User, bio: str) -> OnboardingState:
        """
        Save the biography and finish onboarding.
        """
        return self.submit_profile_update(
            user, ProfileUpdateData(bio=bio, completed_onboarding=True)
        )

    def submit_avatar(self, user: User, avatar: str) -> OnboardingState:
        return self.submit_profile_update(user, ProfileUpdateData(avatar=avatar))

    def submit_profile_update(self, user: User, data: ProfileUpdateData) -> OnboardingState:
        """
        Run one submission of the user profile step.
        :return: `ERROR` when the profile could not be saved, `EDITING` after an avatar
            save and `COMPLETE` once onboarding is finished.
        """
        state_machine = OnboardingStateMachine()
        state_machine.transition_to(OnboardingState.SUBMITTING)

        try:
            result = self.profile_service.update_profile(user=user, data=data)
        except ProfileUpdateError:
            logger.warning("Onboarding profile update failed for user %s", user.pk)
            return state_machine.transition_to(OnboardingState.ERROR)

        return self.handle_profile_update(user, result, state_machine=state_machine)

    def handle_profile_update(
        self,
        user: User,
        result: ProfileUpdateResult,
        state_machine: OnboardingStateMachine | None = None,
    ) -> OnboardingState:
        if state_machine is None:
            state_machine = OnboardingStateMachine(OnboardingState.SUBMITTING)

        if result.kind == ProfileUpdateKind.AVATAR_SAVED:
            return state_machine.transition_to(OnboardingState.EDITING)

        state_machine.transition_to(OnboardingState.SEEDING_DEFAULTS)
        self.seed_default_event_types(user)
        return state_machine.transition_to(OnboardingState.COMPLETE)

    def seed_default_event_types(self, user: User) -> bool:
        """
        Create the default event types for a user that has none yet. Failures are logged
        and never block onboarding.
        :return: Whether the creations were dispatched.
        """
        try:
            if self.event_type_service.user_has_event_types(user):
                return False

            group(
                [
                    create_event_type_task.s(
                        owner_id=user.pk,
                        title=str(event_type["title"]),
                        slug=event_type["slug"],
                        length=event_type["length"],
                        hidden=event_type.get("hidden", False),
                    )
                    for event_type in DEFAULT_EVENT_TYPES
                ]
            ).apply_async()
        except Exception:  # noqa: BLE001
            logger.exception("Failed to create default event types for user %s", user.pk)
            return False

        return True
