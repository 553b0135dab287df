from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parent
BACKEND_DIR = BASE_DIR / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


@pytest.fixture
def weather_payload() -> dict:
    """A successful current-weather response as the API returns it."""

    return {
        "coord": {"lon": -87.65, "lat": 41.85},
        "weather": [
            {"id": 500, "main": "Rain", "description": "LIGHT RAIN", "icon": "10d"}
        ],
        "main": {
            "temp": 72.6,
            "feels_like": 71.3,
            "temp_min": 70.1,
            "temp_max": 74.8,
            "pressure": 1013,
            "humidity": 64,
        },
        "visibility": 10000,
        "wind": {"speed": 8.4, "deg": 210},
        "name": "Chicago",
        "cod": 200,
    }
