from django.apps import AppConfig


class EventTypesConfig(AppConfig):
    name = "event_types"
    verbose_name = "Event Types"
