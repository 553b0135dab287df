"""Option storage for the weather widget.

Options are plain strings persisted in :class:`~weather_widget.models.Option`
under a shared prefix. Every write goes through :class:`SettingsStore`, which
announces it on :data:`~weather_widget.signals.option_added` or
:data:`~weather_widget.signals.option_updated` so subscribers such as the
widget synchronizer can react.
"""

from __future__ import annotations

from typing import Dict, Optional

from django.db.utils import OperationalError, ProgrammingError

from . import signals
from .models import Option

OPTION_PREFIX = "weather_widget_option_"

# Declared defaults, in the order the options are registered.
DEFAULT_OPTIONS: Dict[str, str] = {
    "api_key": "",
    "country_code": "us",
    "zipcode": "",
    "units": "imperial",
    "round_data": "on",
    "show_city": "on",
    "temp": "on",
    "feels_like": "on",
    "summary": "on",
    "desc": "",
    "humidity": "",
    "wind_speed": "",
    "pressure": "",
    "visibility": "",
    "style": "default",
    "rounded_corners": "off",
}

UNIT_CHOICES = ("standard", "metric", "imperial")

CHECKED = "on"
UNCHECKED = "off"


def full_option_name(name: str) -> str:
    """Return the stored name for the bare option ``name``."""

    if name.startswith(OPTION_PREFIX):
        return name
    return f"{OPTION_PREFIX}{name}"


def bare_option_name(option_name: str) -> Optional[str]:
    """Strip the option prefix, or return ``None`` for foreign option names."""

    if not option_name.startswith(OPTION_PREFIX):
        return None
    return option_name[len(OPTION_PREFIX):]


class SettingsStore:
    """Read and write widget options by their bare name (``"zipcode"``)."""

    def get(self, name: str, default: Optional[str] = None) -> str:
        """Return the stored value, falling back to the declared default.

        The options page and the widget may be rendered before the initial
        migration has been applied. A missing table is treated like a missing
        row so both keep rendering with defaults.
        """

        if default is None:
            default = DEFAULT_OPTIONS.get(name, "")
        try:
            option = Option.objects.filter(name=full_option_name(name)).first()
        except (OperationalError, ProgrammingError):
            return default
        if option is None:
            return default
        return option.value

    def is_enabled(self, name: str) -> bool:
        """Checkbox options count as enabled only for the literal ``"on"``."""

        return self.get(name) == CHECKED

    def add(self, name: str, value: str) -> bool:
        """Create the option if it does not exist yet.

        Returns ``True`` when a row was created.
        """

        option_name = full_option_name(name)
        option, created = Option.objects.get_or_create(
            name=option_name, defaults={"value": str(value)}
        )
        if created:
            signals.option_added.send(
                sender=self.__class__, option_name=option_name, value=option.value
            )
        return created

    def set(self, name: str, value: str) -> None:
        """Persist ``value`` and announce the change.

        Writing an unknown option creates it, like :meth:`add` would.
        """

        option_name = full_option_name(name)
        value = str(value)
        option = Option.objects.filter(name=option_name).first()
        if option is None:
            self.add(name, value)
            return
        old_value = option.value
        option.value = value
        option.save(update_fields=["value", "updated_at"])
        signals.option_updated.send(
            sender=self.__class__,
            option_name=option_name,
            old_value=old_value,
            value=value,
        )

    def update(self, values: Dict[str, str]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def as_dict(self) -> Dict[str, str]:
        """Return every declared option with its current value."""

        try:
            rows = list(Option.objects.filter(name__startswith=OPTION_PREFIX))
        except (OperationalError, ProgrammingError):
            rows = []
        stored = {option.name[len(OPTION_PREFIX):]: option.value for option in rows}
        return {name: stored.get(name, default) for name, default in DEFAULT_OPTIONS.items()}


def register_default_options(store: Optional[SettingsStore] = None) -> int:
    """Create every declared option that is missing and mirror it to widgets.

    Existing values are kept. Returns the number of options created.
    """

    store = store or SettingsStore()
    created = 0
    for name, default in DEFAULT_OPTIONS.items():
        if store.add(name, default):
            created += 1
        signals.sync_option_to_widgets(full_option_name(name), store.get(name))
    return created
