from __future__ import annotations

import json

import httpx
import pytest

from weather_widget.weather import FetchError, WeatherSnapshot, build_request_url, fetch_weather


class FakeGet:
    """Stand-in for ``httpx.get`` that records every requested URL."""

    def __init__(self, *, status_code: int = 200, text: str = "", exc: Exception | None = None) -> None:
        self.status_code = status_code
        self.text = text
        self.exc = exc
        self.urls: list[str] = []

    def __call__(self, url: str, **kwargs) -> httpx.Response:
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.text, request=httpx.Request("GET", url))


@pytest.fixture
def fake_get(monkeypatch: pytest.MonkeyPatch):
    def install(**kwargs) -> FakeGet:
        fake = FakeGet(**kwargs)
        monkeypatch.setattr("weather_widget.weather.httpx.get", fake)
        return fake

    return install


def test_missing_api_key_short_circuits(fake_get) -> None:
    fake = fake_get(text="{}")

    result = fetch_weather("", "60601", "us", "imperial")

    assert result.error is FetchError.MISSING_API_KEY
    assert not result.ok
    assert fake.urls == []


def test_missing_zipcode_short_circuits(fake_get) -> None:
    fake = fake_get(text="{}")

    result = fetch_weather("secret", "", "us", "imperial")

    assert result.error is FetchError.MISSING_ZIPCODE
    assert fake.urls == []


def test_missing_api_key_wins_over_missing_zipcode(fake_get) -> None:
    fake = fake_get(text="{}")

    assert fetch_weather("", "", "us", "metric").error is FetchError.MISSING_API_KEY
    assert fake.urls == []


def test_request_url_carries_location_units_and_key() -> None:
    url = build_request_url("secret", "60601", "us", "metric")

    assert url == (
        "http://api.openweathermap.org/data/2.5/weather"
        "?zip=60601,us&units=metric&appid=secret"
    )


def test_successful_response_is_parsed(fake_get, weather_payload: dict) -> None:
    fake = fake_get(text=json.dumps(weather_payload))

    result = fetch_weather("secret", "60601", "us", "imperial")

    assert result.ok
    assert len(fake.urls) == 1
    assert "zip=60601,us" in fake.urls[0]
    assert result.snapshot == WeatherSnapshot(
        city="Chicago",
        temperature=72.6,
        feels_like=71.3,
        summary="Rain",
        description="LIGHT RAIN",
        humidity=64,
        wind_speed=8.4,
        pressure=1013,
        visibility=10000,
        icon="10d",
    )


def test_missing_visibility_defaults_to_zero(fake_get, weather_payload: dict) -> None:
    del weather_payload["visibility"]
    fake_get(text=json.dumps(weather_payload))

    result = fetch_weather("secret", "60601", "us", "imperial")

    assert result.ok
    assert result.snapshot.visibility == 0


def test_transport_failure(fake_get) -> None:
    fake = fake_get(exc=httpx.ConnectError("name resolution failed"))

    result = fetch_weather("secret", "60601", "us", "imperial")

    assert result.error is FetchError.TRANSPORT_ERROR
    assert len(fake.urls) == 1


def test_timeout_is_a_transport_failure(fake_get) -> None:
    fake_get(exc=httpx.ReadTimeout("timed out"))

    assert fetch_weather("secret", "60601", "us", "imperial").error is FetchError.TRANSPORT_ERROR


def test_control_characters_in_location_are_a_transport_failure(fake_get, weather_payload: dict) -> None:
    fake = fake_get(text=json.dumps(weather_payload))

    result = fetch_weather("secret", "606\x0101", "us", "imperial")

    assert result.error is FetchError.TRANSPORT_ERROR
    assert len(fake.urls) == 1


def test_unauthorised_response(fake_get) -> None:
    fake_get(status_code=401, text='{"cod":401, "message": "Invalid API key."}')

    assert fetch_weather("bad", "60601", "us", "imperial").error is FetchError.INVALID_API_KEY


def test_not_found_response_with_string_code(fake_get) -> None:
    fake_get(status_code=404, text='{"cod":"404","message":"city not found"}')

    assert fetch_weather("secret", "00000", "us", "imperial").error is FetchError.INVALID_ZIPCODE


@pytest.mark.parametrize(
    "status_code, body",
    [
        (500, '{"cod": 500}'),
        (429, '{"cod": 429, "message": "rate limited"}'),
        (502, "<html>Bad gateway</html>"),
        (503, ""),
        (400, '{"message": "no code"}'),
    ],
)
def test_other_errors_are_unknown(fake_get, status_code: int, body: str) -> None:
    fake_get(status_code=status_code, text=body)

    assert fetch_weather("secret", "60601", "us", "imperial").error is FetchError.UNKNOWN_API_ERROR


@pytest.mark.parametrize("body", ["", "not json", "{}", "[]", '{"name": "Chicago"}'])
def test_unusable_success_body_is_malformed(fake_get, body: str) -> None:
    fake_get(status_code=200, text=body)

    assert fetch_weather("secret", "60601", "us", "imperial").error is FetchError.MALFORMED_RESPONSE


def test_non_numeric_temperature_is_malformed(fake_get, weather_payload: dict) -> None:
    weather_payload["main"]["temp"] = "warm"
    fake_get(text=json.dumps(weather_payload))

    assert fetch_weather("secret", "60601", "us", "imperial").error is FetchError.MALFORMED_RESPONSE
