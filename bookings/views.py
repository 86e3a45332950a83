import logging
from typing import Annotated

from django.conf import settings
from django.core.cache import cache
from django.shortcuts import redirect, render
from django.views import View
from django.views.generic import TemplateView

from dependency_injector.wiring import Provide, inject
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.exceptions import (
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    CancellationInProgressError,
)
from bookings.serializers import CancelBookingSerializer, CancelPageQuerySerializer
from bookings.services.booking_cancellation_service import BookingCancellationService
from bookings.services.clients.booking_cancellation_client import BookingCancellationClient
from bookings.services.dataclasses import CancelBookingInputData, CancellationPageData
from bookings.utils import (
    build_cancel_success_url,
    get_cancellation_error_message,
    get_cancellation_heading,
    get_cancellation_subtext,
)
from common.exceptions import ServiceNotInjectedError
from common.utils.time_preferences import get_time_preferences
from event_types.recurrence import get_every_freq_for


logger = logging.getLogger(__name__)


class CancelBookingPageView(View):
    """
    Confirmation page reached through the link sent with every booking.
    """

    template_name = "bookings/cancel.html"

    @inject
    def __init__(
        self,
        *args,
        booking_cancellation_service: Annotated[
            "BookingCancellationService | None", Provide["booking_cancellation_service"]
        ] = None,
        booking_cancellation_client: Annotated[
            "BookingCancellationClient | None", Provide["booking_cancellation_client"]
        ] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.booking_cancellation_service = booking_cancellation_service
        self.booking_cancellation_client = booking_cancellation_client

    def get_page_data(self, request, uid: str) -> CancellationPageData:
        if not self.booking_cancellation_service:
            raise ServiceNotInjectedError("booking_cancellation_service")

        query_serializer = CancelPageQuerySerializer(data=request.GET)
        query_serializer.is_valid(raise_exception=True)
        return self.booking_cancellation_service.get_cancellation_page_data(
            uid=uid,
            all_remaining_bookings=query_serializer.validated_data["all_remaining_bookings"],
            user_id=request.user.pk if request.user.is_authenticated else None,
        )

    def get_context_data(self, request, page_data: CancellationPageData, **kwargs):
        context = {
            "page_data": page_data,
            "booking": page_data.booking,
            "profile": page_data.profile,
            "time_preferences": get_time_preferences(request),
            "error": None,
            "cancellation_reason": "",
        }
        if not page_data.is_booking_found:
            context["error"] = BookingNotFoundError.default_message
            context.update(kwargs)
            return context

        recurring_event = page_data.booking.recurring_event
        instances = page_data.recurring_instances or []
        context.update(
            {
                "heading": get_cancellation_heading(page_data),
                "subtext": get_cancellation_subtext(page_data),
                "first_instance": instances[0] if instances else None,
                "more_instances": instances[1:],
                "every_freq": (
                    get_every_freq_for(recurring_event, recurring_count=len(instances))
                    if recurring_event and page_data.recurring_instances
                    else None
                ),
            }
        )
        context.update(kwargs)
        return context

    def get(self, request, uid: str, *args, **kwargs):
        page_data = self.get_page_data(request, uid)
        return render(
            request,
            self.template_name,
            self.get_context_data(request, page_data),
            status=200 if page_data.is_booking_found else 404,
        )

    def post(self, request, uid: str, *args, **kwargs):
        if not self.booking_cancellation_client:
            raise ServiceNotInjectedError("booking_cancellation_client")

        page_data = self.get_page_data(request, uid)
        if not page_data.is_booking_found:
            return render(
                request, self.template_name, self.get_context_data(request, page_data), status=404
            )
        if not page_data.cancellation_allowed:
            return render(
                request, self.template_name, self.get_context_data(request, page_data), status=403
            )

        cancellation_reason = request.POST.get("cancellation_reason", "")
        lock_key = f"booking-cancel:{request.session.session_key or 'anonymous'}:{uid}"
        if not cache.add(lock_key, True, timeout=settings.BOOKING_CANCEL_LOCK_TIMEOUT):
            return render(
                request,
                self.template_name,
                self.get_context_data(
                    request,
                    page_data,
                    error=CancellationInProgressError.default_message,
                    cancellation_reason=cancellation_reason,
                ),
                status=409,
            )

        try:
            logger.info(
                "booking_cancelled",
                extra={
                    "path": request.path,
                    "referrer": request.headers.get("referer", ""),
                    "booking_uid": uid,
                },
            )
            result = self.booking_cancellation_client.cancel_booking(
                CancelBookingInputData(
                    uid=uid,
                    cancellation_reason=cancellation_reason,
                    all_remaining_bookings=page_data.cancels_all_remaining_bookings,
                )
            )
        except CancellationInProgressError as e:
            return render(
                request,
                self.template_name,
                self.get_context_data(
                    request, page_data, error=str(e), cancellation_reason=cancellation_reason
                ),
                status=409,
            )
        finally:
            cache.delete(lock_key)

        if result.kind == "succeeded":
            return redirect(build_cancel_success_url(page_data))

        return render(
            request,
            self.template_name,
            self.get_context_data(
                request,
                page_data,
                error=get_cancellation_error_message(result.status_code),
                cancellation_reason=cancellation_reason,
                loading=self.booking_cancellation_client.loading,
            ),
        )


class CancelBookingSuccessView(TemplateView):
    template_name = "bookings/cancel_success.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        params = self.request.GET
        context.update(
            {
                "name": params.get("name", ""),
                "title": params.get("title", ""),
                "event_page": params.get("eventPage", ""),
                "is_team": params.get("team") == "1",
                "is_recurring": params.get("recurring") == "true",
            }
        )
        return context


class CancelBookingAPIView(APIView):
    """
    Cancels a booking identified by its public `uid`.
    Knowing the `uid` is what authorizes the cancellation.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)
    serializer_class = CancelBookingSerializer

    @inject
    def __init__(
        self,
        *args,
        booking_cancellation_service: Annotated[
            "BookingCancellationService | None", Provide["booking_cancellation_service"]
        ] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.booking_cancellation_service = booking_cancellation_service

    @extend_schema(request=CancelBookingSerializer)
    def delete(self, request, *args, **kwargs):
        if not self.booking_cancellation_service:
            raise ServiceNotInjectedError("booking_cancellation_service")

        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            cancelled = self.booking_cancellation_service.cancel_booking(
                serializer.to_input_data()
            )
        except BookingNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except BookingAlreadyCancelledError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {"message": "Booking cancelled successfully", "cancelled": cancelled},
            status=status.HTTP_200_OK,
        )
