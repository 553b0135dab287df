"""Turn weather results into the widget's HTML fragment."""

from __future__ import annotations

import re
import string
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from django.conf import settings
from django.template.loader import render_to_string

from .options import SettingsStore
from .weather import FetchError, FetchResult, Number, WeatherSnapshot, fetch_weather

WIDGET_TEMPLATE = "weather_widget/widget.html"

ERROR_MESSAGES: Dict[FetchError, Optional[str]] = {
    FetchError.MISSING_API_KEY: "Please provide your OpenWeatherMap API key in the plugin settings.",
    FetchError.MISSING_ZIPCODE: "Please provide a ZIP code in the widget settings or the plugin settings.",
    FetchError.TRANSPORT_ERROR: (
        "An error occurred while retrieving the weather information. Please check your settings."
    ),
    FetchError.INVALID_API_KEY: "Your API Key is not valid. Please check it in the settings.",
    FetchError.INVALID_ZIPCODE: "The ZIP Code is not valid. Please check it in the settings.",
    FetchError.UNKNOWN_API_ERROR: "An unknown error occurred. Please check your settings.",
    # An unreadable success response leaves the widget empty.
    FetchError.MALFORMED_RESPONSE: None,
}


class UnitProfile(NamedTuple):
    """Unit labels for one `units` option value."""

    temperature: str
    wind_speed: str
    pressure: str
    visibility: str


UNIT_PROFILES: Dict[str, UnitProfile] = {
    "metric": UnitProfile("°C", "meter/sec", "hPa", "meters"),
    "imperial": UnitProfile("°F", "miles/hour", "inHg", "miles"),
    "standard": UnitProfile("K", "miles/hour", "hPa", "meters"),
}


def unit_profile(units: str) -> UnitProfile:
    return UNIT_PROFILES.get(units, UNIT_PROFILES["standard"])


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero."""

    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_grouped(value: Number) -> str:
    return f"{round_half_up(value):,}"


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])([a-z])")


def title_words(text: str) -> str:
    """Lower-case ``text`` then capitalise the first letter of every word.

    Only ASCII letters change case and only ASCII whitespace separates words.
    """

    lowered = text.translate(_ASCII_LOWER)
    return _WORD_START.sub(lambda match: match.group(1) + match.group(2).upper(), lowered)


def weather_lines(snapshot: WeatherSnapshot, store: SettingsStore) -> List[Tuple[str, str]]:
    """Return ``(label, text)`` pairs for every field switched on in the options."""

    units = unit_profile(store.get("units"))
    should_round = store.is_enabled("round_data")

    def maybe_round(value: Number) -> str:
        return str(round_half_up(value)) if should_round else format_number(value)

    candidates = [
        ("temp", "Temperature", f"{maybe_round(snapshot.temperature)}{units.temperature}"),
        ("feels_like", "Feels Like", f"{maybe_round(snapshot.feels_like)}{units.temperature}"),
        ("summary", "Summary", snapshot.summary),
        ("desc", "Description", title_words(snapshot.description)),
        ("humidity", "Humidity", f"{format_number(snapshot.humidity)}%"),
        ("wind_speed", "Wind Speed", f"{maybe_round(snapshot.wind_speed)} {units.wind_speed}"),
        ("pressure", "Pressure", f"{format_grouped(snapshot.pressure)} {units.pressure}"),
        ("visibility", "Visibility", f"{format_grouped(snapshot.visibility)} {units.visibility}"),
    ]
    return [(label, text) for name, label, text in candidates if store.is_enabled(name)]


def icon_url(icon: str) -> str:
    template = getattr(settings, "OPENWEATHERMAP_ICON_URL", "http://openweathermap.org/img/w/{icon}.png")
    return template.format(icon=icon)


def render_weather(snapshot: WeatherSnapshot, store: SettingsStore) -> str:
    return render_to_string(
        WIDGET_TEMPLATE,
        {
            "snapshot": snapshot,
            "icon_url": icon_url(snapshot.icon),
            "show_city": store.is_enabled("show_city"),
            "lines": weather_lines(snapshot, store),
            "rounded_corners": store.is_enabled("rounded_corners"),
        },
    )


def render_error(error: FetchError) -> str:
    return render_to_string(WIDGET_TEMPLATE, {"message": ERROR_MESSAGES[error]})


def render_result(result: FetchResult, store: SettingsStore) -> str:
    if result.ok:
        return render_weather(result.snapshot, store)
    return render_error(result.error)


def render_widget(
    store: Optional[SettingsStore] = None,
    fetch: Callable[[str, str, str, str], FetchResult] = fetch_weather,
) -> str:
    """Fetch the configured location and render the complete widget."""

    store = store or SettingsStore()
    result = fetch(
        store.get("api_key"),
        store.get("zipcode"),
        store.get("country_code"),
        store.get("units"),
    )
    return render_result(result, store)
