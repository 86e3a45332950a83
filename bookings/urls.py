from django.urls import path

from bookings.views import CancelBookingAPIView, CancelBookingPageView, CancelBookingSuccessView


app_name = "bookings"

urlpatterns = [
    path("cancel/success/", CancelBookingSuccessView.as_view(), name="cancel-success"),
    path("cancel/<str:uid>/", CancelBookingPageView.as_view(), name="cancel"),
    path("api/cancel/", CancelBookingAPIView.as_view(), name="cancel-api"),
]
