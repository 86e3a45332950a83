from django.core.exceptions import ImproperlyConfigured


class ServiceNotInjectedError(ImproperlyConfigured):
    def __init__(self, service_name: str):
        super().__init__(f"`{service_name}` was not injected. Is the DI container wired?")
