from __future__ import annotations

import pytest
from django.contrib.auth.models import User

from weather_widget.options import SettingsStore, register_default_options


@pytest.fixture(autouse=True)
def registered_options(db) -> None:
    register_default_options()


@pytest.fixture
def store() -> SettingsStore:
    return SettingsStore()


@pytest.fixture
def operator(client) -> User:
    user = User.objects.create_user(username="operator", password="password123", is_staff=True)
    client.force_login(user)
    return user
