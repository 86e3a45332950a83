from onboarding.constants import ONBOARDING_TRANSITIONS, OnboardingState
from onboarding.exceptions import InvalidOnboardingTransitionError


class OnboardingStateMachine:
    """
    Tracks a single submission of the user profile onboarding step.
    """

    def __init__(self, state: OnboardingState = OnboardingState.EDITING):
        self.state = state

    def can_transition_to(self, target_state: OnboardingState) -> bool:
        return target_state in ONBOARDING_TRANSITIONS[self.state]

    def transition_to(self, target_state: OnboardingState) -> OnboardingState:
        if not self.can_transition_to(target_state):
            raise InvalidOnboardingTransitionError(self.state, target_state)
        self.state = target_state
        return self.state
