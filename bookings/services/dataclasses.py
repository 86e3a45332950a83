import datetime
from dataclasses import dataclass
from typing import Literal

from bookings.constants import BookingStatus
from event_types.recurrence import RecurringEvent


@dataclass(frozen=True)
class BookingProfile:
    name: str | None
    slug: str | None
    brand_color: str | None
    dark_brand_color: str | None


@dataclass(frozen=True)
class RecurringInstance:
    start_time: datetime.datetime
    end_time: datetime.datetime


@dataclass(frozen=True)
class BookingDetails:
    uid: str
    title: str
    description: str
    start_time: datetime.datetime
    end_time: datetime.datetime
    status: BookingStatus
    user_id: int | None
    event_type_id: int | None
    recurring_event_id: str | None
    recurring_event: RecurringEvent | None
    is_team_event: bool


@dataclass(frozen=True)
class CancellationPageData:
    booking: BookingDetails | None
    profile: BookingProfile | None = None
    recurring_instances: list[RecurringInstance] | None = None
    cancellation_allowed: bool = False

    @property
    def is_booking_found(self) -> bool:
        return self.booking is not None

    @property
    def cancels_all_remaining_bookings(self) -> bool:
        return self.recurring_instances is not None


@dataclass(frozen=True)
class CancelBookingInputData:
    uid: str
    cancellation_reason: str
    all_remaining_bookings: bool

    def to_payload(self) -> dict:
        return {
            "uid": self.uid,
            "cancellationReason": self.cancellation_reason,
            "allRemainingBookings": self.all_remaining_bookings,
        }


@dataclass(frozen=True)
class CancellationSucceeded:
    status_code: int
    kind: Literal["succeeded"] = "succeeded"


@dataclass(frozen=True)
class CancellationFailed:
    status_code: int | None
    kind: Literal["failed"] = "failed"


CancellationResult = CancellationSucceeded | CancellationFailed
