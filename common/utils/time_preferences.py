from dataclasses import dataclass
from urllib.parse import unquote
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings
from django.utils import timezone


DATETIME_FORMAT_12H = "g:i a, l d F Y"
DATETIME_FORMAT_24H = "H:i, l d F Y"


@dataclass(frozen=True)
class TimePreferences:
    timezone: str
    use_24_hour_clock: bool = False

    @property
    def datetime_format(self) -> str:
        return DATETIME_FORMAT_24H if self.use_24_hour_clock else DATETIME_FORMAT_12H


def _is_valid_timezone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def get_time_preferences(request) -> TimePreferences:
    """
    Read the visitor's display preferences from the cookies set by the booking pages.
    Unknown or missing timezones fall back to the active timezone.
    """
    preferred_timezone = unquote(request.COOKIES.get(settings.PREFERRED_TIMEZONE_COOKIE, ""))
    if not preferred_timezone or not _is_valid_timezone(preferred_timezone):
        preferred_timezone = timezone.get_current_timezone_name()

    use_24_hour_clock = request.COOKIES.get(settings.TIME_FORMAT_24H_COOKIE, "") == "true"
    return TimePreferences(timezone=preferred_timezone, use_24_hour_clock=use_24_hour_clock)
