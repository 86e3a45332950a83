from django.db.models import TextChoices


class OnboardingState(TextChoices):
    EDITING = "editing", "Editing"
    SUBMITTING = "submitting", "Submitting"
    SEEDING_DEFAULTS = "seeding_defaults", "Seeding Defaults"
    COMPLETE = "complete", "Complete"
    ERROR = "error", "Error"


ONBOARDING_TRANSITIONS = {
    OnboardingState.EDITING: frozenset({OnboardingState.SUBMITTING}),
    # an avatar-only save goes straight back to editing
    OnboardingState.SUBMITTING: frozenset(
        {OnboardingState.EDITING, OnboardingState.SEEDING_DEFAULTS, OnboardingState.ERROR}
    ),
    OnboardingState.SEEDING_DEFAULTS: frozenset({OnboardingState.COMPLETE}),
    OnboardingState.ERROR: frozenset({OnboardingState.EDITING}),
    OnboardingState.COMPLETE: frozenset(),
}
