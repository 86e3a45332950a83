from typing import Annotated

from dependency_injector.wiring import Provide, inject
from django_virtual_models.generic_views import GenericVirtualModelViewMixin
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.exceptions import ValidationError
from rest_framework.generics import RetrieveUpdateAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ViewSet

from common.exceptions import ServiceNotInjectedError
from users.exceptions import ProfileUpdateError
from users.serializers import ProfileSerializer
from users.services import ProfileService, ProfileUpdateData

from .models import Profile
from .permissions import ProfileReadOnlyExceptYourOwn


USER_PATH_PARAMETER = OpenApiParameter(
    "user",
    location="path",
    required=True,
    description="User ID of the profile. Use 'me' to refer to the currently authenticated user.",
    type={"type": "string"},
)


class ProfileViewSet(GenericVirtualModelViewMixin, ViewSet, RetrieveUpdateAPIView):
    serializer_class = ProfileSerializer
    queryset = Profile.objects.all()
    lookup_url_kwarg = "pk"
    lookup_field = "pk"
    permission_classes = (
        IsAuthenticated,
        ProfileReadOnlyExceptYourOwn,
    )

    @inject
    def __init__(
        self,
        *args,
        profile_service: Annotated["ProfileService | None", Provide["profile_service"]] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.profile_service = profile_service

    def get_object(self):
        """
        Returns the profile of the currently authenticated user.
        """
        if self.kwargs.get("pk") == "me":
            obj = self.get_queryset().filter(pk=self.request.user.pk).first()
            self.check_object_permissions(self.request, obj)
            return obj

        return super().get_object()

    def perform_update(self, serializer):
        if not self.profile_service:
            raise ServiceNotInjectedError("profile_service")

        try:
            result = self.profile_service.update_profile(
                user=serializer.instance.user,
                data=ProfileUpdateData(**serializer.validated_data),
            )
        except ProfileUpdateError as e:
            raise ValidationError({"non_field_errors": [str(e)]}) from e
        serializer.instance = result.profile

    @extend_schema(parameters=[USER_PATH_PARAMETER])
    def retrieve(self, request, *args, **kwargs):
        """
        Retrieve the profile of the currently authenticated user or a specific user.
        """
        return super().retrieve(request, *args, **kwargs)

    @extend_schema(parameters=[USER_PATH_PARAMETER])
    def update(self, request, *args, **kwargs):
        return super().update(request, *args, **kwargs)

    @extend_schema(parameters=[USER_PATH_PARAMETER])
    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)
