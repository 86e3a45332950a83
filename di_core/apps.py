from django.apps import AppConfig
from django.conf import settings


class DICoreConfig(AppConfig):
    name = "di_core"
    verbose_name = "Dependency Injection"

    def ready(self) -> None:
        from di_core import containers

        app_container = containers.AppContainer()
        # settings are exposed to providers as `config.<SETTING_NAME>`
        app_container.config.from_dict(
            {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
        )
        app_container.wire(packages=settings.INTERNAL_INSTALLED_APPS)

        containers.container = app_container
