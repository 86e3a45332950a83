import datetime
import logging

from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction
from django.utils import timezone

from bookings.constants import INACTIVE_BOOKING_STATUSES, BookingStatus
from bookings.exceptions import BookingAlreadyCancelledError, BookingNotFoundError
from bookings.models import Booking
from bookings.services.dataclasses import (
    BookingDetails,
    BookingProfile,
    CancelBookingInputData,
    CancellationPageData,
    RecurringInstance,
)


logger = logging.getLogger(__name__)


def is_cancellation_allowed(
    *,
    now: datetime.datetime,
    start_time: datetime.datetime,
    requester_id: int | None,
    owner_id: int | None,
) -> bool:
    """
    The owner may always cancel, anyone holding the booking link may cancel until it starts.
    """
    is_owner = requester_id is not None and requester_id == owner_id
    return is_owner or start_time >= now


class BookingCancellationService:
    def get_cancellation_page_data(
        self,
        uid: str,
        all_remaining_bookings: bool = False,
        user_id: int | None = None,
        now: datetime.datetime | None = None,
    ) -> CancellationPageData:
        """
        Resolve everything the cancellation page needs for the booking `uid`.
        :param uid: Public booking token.
        :param all_remaining_bookings: Whether the visitor asked to cancel every remaining
            occurrence of a recurring booking.
        :param user_id: Id of the authenticated visitor, if any.
        :param now: Reference time, defaults to the current time.
        :return: Page data, with `booking=None` when no booking matches `uid`.
        """
        now = now or timezone.now()
        booking = (
            Booking.objects.select_related("user__profile", "event_type__team")
            .filter(uid=uid)
            .first()
        )
        if not booking:
            return CancellationPageData(booking=None)

        event_type = booking.event_type
        recurring_event = event_type.parsed_recurring_event if event_type else None

        recurring_instances = None
        if recurring_event and all_remaining_bookings:
            recurring_instances = self.get_remaining_recurring_instances(booking, now=now)

        return CancellationPageData(
            booking=BookingDetails(
                uid=booking.uid,
                title=booking.title,
                description=booking.description,
                start_time=booking.start_time,
                end_time=booking.end_time,
                status=BookingStatus(booking.status),
                user_id=booking.user_id,
                event_type_id=booking.event_type_id,
                recurring_event_id=booking.recurring_event_id,
                recurring_event=recurring_event,
                is_team_event=bool(event_type and event_type.team_id),
            ),
            profile=self.get_booking_profile(booking),
            recurring_instances=recurring_instances,
            cancellation_allowed=is_cancellation_allowed(
                now=now,
                start_time=booking.start_time,
                requester_id=user_id,
                owner_id=booking.user_id,
            ),
        )

    def get_remaining_recurring_instances(
        self, booking: Booking, now: datetime.datetime
    ) -> list[RecurringInstance]:
        if booking.recurring_event_id:
            queryset = Booking.objects.filter_remaining_in_series(booking.recurring_event_id, now)
        else:
            # a booking outside of any series is its own single-occurrence series
            queryset = (
                Booking.objects.filter(pk=booking.pk).filter_starting_from(now).filter_active()
            )

        return [
            RecurringInstance(start_time=start_time, end_time=end_time)
            for start_time, end_time in queryset.values_list("start_time", "end_time")
        ]

    def get_booking_profile(self, booking: Booking) -> BookingProfile:
        team = booking.event_type.team if booking.event_type else None
        user = booking.user

        try:
            user_profile = user.profile if user else None
        except ObjectDoesNotExist:
            user_profile = None

        user_name = user.get_full_name() if user and user_profile else None
        return BookingProfile(
            name=(team.name if team else None) or user_name or None,
            slug=(team.slug if team else None) or (user.username if user else None) or None,
            brand_color=(user_profile.brand_color if user_profile else None) or None,
            dark_brand_color=(user_profile.dark_brand_color if user_profile else None) or None,
        )

    def cancel_booking(
        self, data: CancelBookingInputData, now: datetime.datetime | None = None
    ) -> int:
        """
        Cancel the booking `data.uid` and, when requested, the remaining occurrences of its
        recurring series.
        :return: Number of bookings cancelled.
        """
        now = now or timezone.now()
        with transaction.atomic():
            booking = Booking.objects.select_for_update().filter(uid=data.uid).first()
            if not booking:
                raise BookingNotFoundError()
            if booking.status in INACTIVE_BOOKING_STATUSES:
                raise BookingAlreadyCancelledError()

            booking_ids = {booking.pk}
            if data.all_remaining_bookings and booking.recurring_event_id:
                booking_ids.update(
                    Booking.objects.filter_remaining_in_series(
                        booking.recurring_event_id, now
                    ).values_list("pk", flat=True)
                )

            cancelled_count = Booking.objects.filter(pk__in=booking_ids).update(
                status=BookingStatus.CANCELLED,
                cancellation_reason=data.cancellation_reason,
                modified=now,
            )

        logger.info(
            "Cancelled %s booking(s) for booking %s (all remaining: %s)",
            cancelled_count,
            data.uid,
            data.all_remaining_bookings,
        )
        return cancelled_count
