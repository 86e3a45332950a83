import django_virtual_models as v

from users.models import Profile


class ProfileVirtualModel(v.VirtualModel):
    class Meta(v.VirtualModel.Meta):
        model = Profile
