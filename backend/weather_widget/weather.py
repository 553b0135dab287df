"""Fetch current conditions from the OpenWeatherMap API."""

from __future__ import annotations

import enum
import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)

Number = Union[int, float]


class FetchError(str, enum.Enum):
    """Reasons a fetch produced no snapshot."""

    MISSING_API_KEY = "missing_api_key"
    MISSING_ZIPCODE = "missing_zipcode"
    TRANSPORT_ERROR = "transport_error"
    INVALID_API_KEY = "invalid_api_key"
    INVALID_ZIPCODE = "invalid_zipcode"
    UNKNOWN_API_ERROR = "unknown_api_error"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions parsed from one API response."""

    city: str
    temperature: Number
    feels_like: Number
    summary: str
    description: str
    humidity: Number
    wind_speed: Number
    pressure: Number
    visibility: Number
    icon: str


@dataclass(frozen=True)
class FetchResult:
    """Either a snapshot or the reason there is none."""

    snapshot: Optional[WeatherSnapshot] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.snapshot is not None

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult":
        return cls(error=error)


def build_request_url(api_key: str, zipcode: str, country_code: str, units: str) -> str:
    base_url = getattr(
        settings, "OPENWEATHERMAP_API_URL", "http://api.openweathermap.org/data/2.5/weather"
    )
    return f"{base_url}?zip={zipcode},{country_code}&units={units}&appid={api_key}"


def _to_number(value: Any) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        raise ValueError("expected a finite number")
    return value


def _to_text(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def parse_snapshot(payload: Any) -> WeatherSnapshot:
    """Build a :class:`WeatherSnapshot` from a decoded success payload.

    Raises ``ValueError`` when the payload does not have the expected shape.
    """

    if not isinstance(payload, dict) or not payload:
        raise ValueError("empty weather payload")
    try:
        main: Dict[str, Any] = payload["main"]
        condition: Dict[str, Any] = payload["weather"][0]
        return WeatherSnapshot(
            city=_to_text(payload["name"]),
            temperature=_to_number(main["temp"]),
            feels_like=_to_number(main["feels_like"]),
            summary=_to_text(condition["main"]),
            description=_to_text(condition["description"]),
            humidity=_to_number(main["humidity"]),
            wind_speed=_to_number(payload["wind"]["speed"]),
            pressure=_to_number(main["pressure"]),
            # Not every station reports visibility.
            visibility=_to_number(payload.get("visibility", 0)),
            icon=_to_text(condition["icon"]),
        )
    except (KeyError, IndexError, TypeError) as exc:
        raise ValueError(f"unexpected weather payload: {exc}") from exc


def _classify_error_body(body: str) -> FetchError:
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return FetchError.UNKNOWN_API_ERROR
    if not isinstance(data, dict):
        return FetchError.UNKNOWN_API_ERROR

    # The API reports 401 as a number and 404 as a string.
    try:
        code = int(data.get("cod"))
    except (TypeError, ValueError):
        return FetchError.UNKNOWN_API_ERROR

    if code == 401:
        return FetchError.INVALID_API_KEY
    if code == 404:
        return FetchError.INVALID_ZIPCODE
    return FetchError.UNKNOWN_API_ERROR


def fetch_weather(api_key: str, zipcode: str, country_code: str, units: str) -> FetchResult:
    """Request current conditions for a ZIP code.

    A single GET is issued with httpx's default timeout; nothing is retried.
    Missing credentials short-circuit before any request is made.
    """

    if not api_key:
        return FetchResult.failure(FetchError.MISSING_API_KEY)
    if not zipcode:
        return FetchResult.failure(FetchError.MISSING_ZIPCODE)

    url = build_request_url(api_key, zipcode, country_code, units)
    try:
        response = httpx.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Weather request for %s,%s failed: %s", zipcode, country_code, exc)
        return FetchResult.failure(FetchError.TRANSPORT_ERROR)

    if response.status_code != 200:
        error = _classify_error_body(response.text)
        logger.warning(
            "Weather API answered %s for %s,%s (%s)",
            response.status_code,
            zipcode,
            country_code,
            error.value,
        )
        return FetchResult.failure(error)

    try:
        snapshot = parse_snapshot(json.loads(response.text))
    except ValueError as exc:
        logger.warning("Discarding malformed weather response: %s", exc)
        return FetchResult.failure(FetchError.MALFORMED_RESPONSE)

    return FetchResult(snapshot=snapshot)
