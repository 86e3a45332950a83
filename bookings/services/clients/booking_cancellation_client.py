import logging

import requests

from bookings.exceptions import CancellationInProgressError
from bookings.services.dataclasses import (
    CancelBookingInputData,
    CancellationFailed,
    CancellationResult,
    CancellationSucceeded,
)


logger = logging.getLogger(__name__)


class BookingCancellationClient:
    """
    Sends cancellation requests to the bookings cancel endpoint.

    A client instance submits one request at a time: a second `cancel_booking` call made
    while the first one is in flight raises `CancellationInProgressError`. The container
    builds a new client per view, so this only covers a single page submission. Duplicate
    submits across requests are blocked by the cache lock in `CancelBookingPageView`.
    """

    def __init__(self, api_url: str, timeout: float = 30.0):
        self.api_url = api_url
        self.timeout = timeout
        self.loading = False

    def cancel_booking(self, data: CancelBookingInputData) -> CancellationResult:
        if self.loading:
            raise CancellationInProgressError()

        self.loading = True
        try:
            response = requests.delete(
                self.api_url,
                json=data.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException:
            logger.exception("Could not reach the cancellation endpoint for booking %s", data.uid)
            return CancellationFailed(status_code=None)
        finally:
            self.loading = False

        if 200 <= response.status_code < 300:
            return CancellationSucceeded(status_code=response.status_code)

        logger.warning(
            "Cancellation of booking %s failed with status code %s",
            data.uid,
            response.status_code,
        )
        return CancellationFailed(status_code=response.status_code)
