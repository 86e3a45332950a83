import datetime

from django.utils import timezone

from model_bakery import baker

from bookings.constants import BookingStatus
from bookings.models import Booking
from common.utils.model_utils import generate_unique_id


class BookingFactory:
    @staticmethod
    def create_booking(
        user=None,
        event_type=None,
        start_time: datetime.datetime | None = None,
        length: int = 30,
        status: str = BookingStatus.ACCEPTED,
        title="30 Min Meeting",
        **kwargs,
    ) -> Booking:
        start_time = start_time or timezone.now() + datetime.timedelta(days=1)
        return baker.make(
            Booking,
            user=user,
            event_type=event_type,
            title=title,
            start_time=start_time,
            end_time=start_time + datetime.timedelta(minutes=length),
            status=status,
            **kwargs,
        )

    @staticmethod
    def create_recurring_series(
        user=None,
        event_type=None,
        first_start_time: datetime.datetime | None = None,
        occurrences: int = 4,
        every: datetime.timedelta = datetime.timedelta(weeks=1),
        **kwargs,
    ) -> list[Booking]:
        """
        Create `occurrences` bookings sharing a recurring series id, `every` apart.
        """
        first_start_time = first_start_time or timezone.now() + datetime.timedelta(days=1)
        recurring_event_id = generate_unique_id()
        return [
            BookingFactory.create_booking(
                user=user,
                event_type=event_type,
                start_time=first_start_time + every * index,
                recurring_event_id=recurring_event_id,
                **kwargs,
            )
            for index in range(occurrences)
        ]
