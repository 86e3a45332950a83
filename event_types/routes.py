from common.routes import RouteDict

from .views import EventTypeViewSet


routes: list[RouteDict] = [
    {"regex": r"event-types", "viewset": EventTypeViewSet, "basename": "EventTypes"},
]
