import django_virtual_models as v

from event_types.models import EventType


class EventTypeVirtualModel(v.VirtualModel):
    class Meta(v.VirtualModel.Meta):
        model = EventType
