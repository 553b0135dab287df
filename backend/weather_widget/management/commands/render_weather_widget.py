from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand

from ...options import SettingsStore
from ...rendering import render_widget


class Command(BaseCommand):
    help = "Fetch current weather for the configured location and print the widget HTML"

    def add_arguments(self, parser) -> None:
        parser.add_argument("--zipcode", help="Override the stored ZIP code for this run")
        parser.add_argument("--country-code", help="Override the stored country code for this run")

    def handle(self, *args: Any, **options: Any) -> None:
        store = SettingsStore()
        overrides = {
            "zipcode": options.get("zipcode"),
            "country_code": options.get("country_code"),
        }
        self.stdout.write(render_widget(_OverrideStore(store, overrides)))


class _OverrideStore(SettingsStore):
    """Read-only view of a store with some values replaced for one render."""

    def __init__(self, store: SettingsStore, overrides: dict) -> None:
        self._store = store
        self._overrides = {name: value for name, value in overrides.items() if value is not None}

    def get(self, name: str, default: str | None = None) -> str:
        if name in self._overrides:
            return self._overrides[name]
        return self._store.get(name, default)
