from django.db.models import Model

import django_virtual_models as v
from rest_framework import serializers


def update_model_instance_from_dict(instance: Model, data: dict) -> Model:
    for key, value in data.items():
        setattr(instance, key, value)
    return instance


class VirtualModelSerializer(v.VirtualModelSerializerMixin, serializers.ModelSerializer):
    pass
