from common.routes import RouteDict

from .views import ProfileViewSet


routes: list[RouteDict] = [
    {"regex": r"profiles", "viewset": ProfileViewSet, "basename": "Profile"},
]
