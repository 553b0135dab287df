from __future__ import annotations

from django.apps import AppConfig
from django.db.models.signals import post_migrate


def _register_options_after_migrate(sender, **kwargs) -> None:
    from .options import register_default_options

    register_default_options()


class WeatherWidgetConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "weather_widget"
    verbose_name = "OpenWeatherMap Widget"

    def ready(self) -> None:
        from . import signals  # noqa: F401  (connects the synchronizer receivers)

        post_migrate.connect(_register_options_after_migrate, sender=self)
