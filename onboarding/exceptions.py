class OnboardingError(Exception):
    """Base exception for onboarding errors"""

    pass


class InvalidOnboardingTransitionError(OnboardingError):
    def __init__(self, current_state: str, target_state: str):
        super().__init__(f"Cannot move onboarding from `{current_state}` to `{target_state}`.")
        self.current_state = current_state
        self.target_state = target_state
