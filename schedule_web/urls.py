from django.contrib import admin
from django.http import Http404
from django.urls import include, path

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework.routers import DefaultRouter

from common.routes import register_routes
from event_types.routes import routes as event_types_routes
from users.routes import routes as users_routes


router = register_routes(DefaultRouter(use_regex_path=False), event_types_routes, users_routes)


def frontend_view(request, *args, **kwargs):
    raise Http404()


# pages served by the booking frontend, only reversed here
referenced_frontend_urlpatterns = [
    path("", frontend_view, name="home"),
    path("reschedule/<str:uid>/", frontend_view, name="reschedule"),
]


urlpatterns = [
    path("", include("bookings.urls")),
    path("getting-started/", include("onboarding.urls")),
    path("api/", include((router.urls, "api")), name="api"),
    path("super/", admin.site.urls, name="admin"),
    # drf-spectacular
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    *referenced_frontend_urlpatterns,
]
