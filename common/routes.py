from collections.abc import Iterable
from typing import TypedDict

from rest_framework.routers import BaseRouter
from rest_framework.viewsets import GenericViewSet, ModelViewSet, ViewSet, ViewSetMixin


class RouteDict(TypedDict):
    """Where an app's viewset is mounted on the API router."""

    regex: str
    viewset: type[GenericViewSet] | type[ViewSet] | type[ModelViewSet] | type[ViewSetMixin]
    basename: str


def register_routes(router: BaseRouter, *app_routes: Iterable[RouteDict]) -> BaseRouter:
    for routes in app_routes:
        for route in routes:
            router.register(route["regex"], route["viewset"], basename=route["basename"])
    return router
