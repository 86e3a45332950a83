from rest_framework import serializers

from common.utils.serializer_utils import VirtualModelSerializer

from .models import Profile
from .virtual_models import ProfileVirtualModel


class ProfileSerializer(VirtualModelSerializer):
    id = serializers.IntegerField(source="user_id", read_only=True)  # noqa: A003

    class Meta:  # type: ignore
        model = Profile
        virtual_model = ProfileVirtualModel
        fields = (
            "id",
            "first_name",
            "last_name",
            "bio",
            "avatar",
            "brand_color",
            "dark_brand_color",
            "completed_onboarding",
        )

