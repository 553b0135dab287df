from __future__ import annotations

import pytest
from django.core.management import call_command

from weather_widget import signals
from weather_widget.models import Option
from weather_widget.options import (
    DEFAULT_OPTIONS,
    OPTION_PREFIX,
    SettingsStore,
    bare_option_name,
    full_option_name,
    register_default_options,
)

pytestmark = pytest.mark.django_db


def test_every_option_reads_its_default_after_registration() -> None:
    Option.objects.all().delete()

    created = register_default_options()

    store = SettingsStore()
    assert created == len(DEFAULT_OPTIONS)
    for name, default in DEFAULT_OPTIONS.items():
        assert store.get(name) == default
        assert Option.objects.filter(name=f"{OPTION_PREFIX}{name}").exists()


def test_registration_keeps_existing_values() -> None:
    store = SettingsStore()
    store.set("zipcode", "60601")

    created = register_default_options(store)

    assert created == 0
    assert store.get("zipcode") == "60601"


def test_management_command_registers_missing_options() -> None:
    Option.objects.filter(name=full_option_name("units")).delete()

    call_command("register_weather_options")

    assert SettingsStore().get("units") == "imperial"
    assert Option.objects.filter(name=full_option_name("units")).exists()


def test_missing_row_reads_declared_default() -> None:
    Option.objects.all().delete()

    store = SettingsStore()

    assert store.get("country_code") == "us"
    assert store.get("style") == "default"
    assert store.get("unknown_option") == ""
    assert store.get("unknown_option", "fallback") == "fallback"


def test_get_returns_defaults_when_table_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    from django.db.utils import OperationalError

    def broken_filter(*args, **kwargs):
        raise OperationalError("no such table: weather_widget_option")

    monkeypatch.setattr(Option.objects, "filter", broken_filter)

    store = SettingsStore()

    assert store.get("units") == "imperial"
    assert store.as_dict() == DEFAULT_OPTIONS


def test_set_updates_value_and_announces_change() -> None:
    received = []

    def listener(sender, option_name, old_value, value, **kwargs):
        received.append((option_name, old_value, value))

    signals.option_updated.connect(listener)
    try:
        store = SettingsStore()
        store.set("units", "metric")
    finally:
        signals.option_updated.disconnect(listener)

    assert store.get("units") == "metric"
    assert received == [(f"{OPTION_PREFIX}units", "imperial", "metric")]


def test_set_on_missing_option_creates_it_and_announces_addition() -> None:
    Option.objects.filter(name=full_option_name("zipcode")).delete()
    received = []

    def listener(sender, option_name, value, **kwargs):
        received.append((option_name, value))

    signals.option_added.connect(listener)
    try:
        SettingsStore().set("zipcode", "10001")
    finally:
        signals.option_added.disconnect(listener)

    assert received == [(f"{OPTION_PREFIX}zipcode", "10001")]
    assert SettingsStore().get("zipcode") == "10001"


def test_add_does_not_overwrite() -> None:
    store = SettingsStore()
    store.set("country_code", "gb")

    assert store.add("country_code", "us") is False
    assert store.get("country_code") == "gb"


@pytest.mark.parametrize(
    "value, expected",
    [("on", True), ("off", False), ("", False), ("ON", False), ("yes", False), ("1", False)],
)
def test_only_literal_on_is_enabled(value: str, expected: bool) -> None:
    store = SettingsStore()
    store.set("humidity", value)

    assert store.is_enabled("humidity") is expected


def test_absent_checkbox_is_disabled() -> None:
    Option.objects.filter(name=full_option_name("pressure")).delete()

    assert SettingsStore().is_enabled("pressure") is False


def test_option_names_round_trip_through_prefix() -> None:
    assert full_option_name("zipcode") == "weather_widget_option_zipcode"
    assert full_option_name("weather_widget_option_zipcode") == "weather_widget_option_zipcode"
    assert bare_option_name("weather_widget_option_zipcode") == "zipcode"
    assert bare_option_name("blogname") is None


def test_as_dict_lists_every_declared_option() -> None:
    store = SettingsStore()
    store.set("api_key", "secret")

    values = store.as_dict()

    assert list(values) == list(DEFAULT_OPTIONS)
    assert values["api_key"] == "secret"
