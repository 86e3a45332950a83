from dependency_injector import containers, providers

from bookings.services.booking_cancellation_service import BookingCancellationService
from bookings.services.clients.booking_cancellation_client import BookingCancellationClient
from event_types.services import EventTypeService
from onboarding.services import OnboardingService
from users.services import ProfileService


class AppContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    profile_service = providers.Factory(
        ProfileService,
    )

    event_type_service = providers.Factory(
        EventTypeService,
    )

    onboarding_service = providers.Factory(
        OnboardingService,
        profile_service=profile_service,
        event_type_service=event_type_service,
    )

    booking_cancellation_service = providers.Factory(
        BookingCancellationService,
    )

    booking_cancellation_client = providers.Factory(
        BookingCancellationClient,
        api_url=config.BOOKING_CANCEL_API_URL,
        timeout=config.BOOKING_CANCEL_API_TIMEOUT,
    )


container: AppContainer | None = None  # set during app startup
