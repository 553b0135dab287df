"""Ordered description of the fields shown on the options page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .options import DEFAULT_OPTIONS
from .styles import available_styles

TEXT = "text"
CHECKBOX = "checkbox"
SELECT = "select"

Choices = Sequence[Tuple[str, str]]


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    label: str
    kind: str
    note: str = ""
    choices: Choices = ()
    # Select fields whose options are only known at render time.
    choices_loader: Optional[Callable[[], Choices]] = None

    @property
    def default(self) -> str:
        return DEFAULT_OPTIONS[self.name]

    def get_choices(self) -> Choices:
        if self.choices_loader is not None:
            return self.choices_loader()
        return self.choices


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    fields: List[FieldDescriptor] = field(default_factory=list)


def _style_choices() -> Choices:
    return [(style, style) for style in available_styles()]


SECTIONS: List[Section] = [
    Section(
        key="general",
        title="General Settings",
        fields=[
            FieldDescriptor(
                "api_key",
                "API Key",
                TEXT,
                note=(
                    "You can register for a free API key on "
                    '<a href="http://openweathermap.org/appid" target="_blank">'
                    "OpenWeatherMap's website</a>."
                ),
            ),
            FieldDescriptor(
                "country_code",
                "Country Code",
                TEXT,
                note=(
                    'The <a href="https://en.wikipedia.org/wiki/List_of_ISO_3166_country_codes">'
                    "2-letter country code</a>."
                ),
            ),
            FieldDescriptor("zipcode", "ZIP Code", TEXT),
            FieldDescriptor(
                "units",
                "Units of Measurement",
                SELECT,
                choices=[
                    ("standard", "Standard"),
                    ("metric", "Metric"),
                    ("imperial", "Imperial"),
                ],
            ),
            FieldDescriptor("round_data", "Round Weather Data", CHECKBOX),
        ],
    ),
    Section(
        key="weather",
        title="Weather Options",
        fields=[
            FieldDescriptor("show_city", "Show City", CHECKBOX),
            FieldDescriptor("temp", "Temperature", CHECKBOX),
            FieldDescriptor("feels_like", "Feels Like", CHECKBOX),
            FieldDescriptor("summary", "Summary", CHECKBOX),
            FieldDescriptor("desc", "Description", CHECKBOX),
            FieldDescriptor("humidity", "Humidity", CHECKBOX),
            FieldDescriptor("wind_speed", "Wind Speed", CHECKBOX),
            FieldDescriptor("pressure", "Pressure", CHECKBOX),
            FieldDescriptor("visibility", "Visibility", CHECKBOX),
        ],
    ),
    Section(
        key="style",
        title="Style Settings",
        fields=[
            FieldDescriptor("style", "Style", SELECT, choices_loader=_style_choices),
            FieldDescriptor("rounded_corners", "Rounded Corners", CHECKBOX),
        ],
    ),
]


def iter_fields():
    for section in SECTIONS:
        yield from section.fields
