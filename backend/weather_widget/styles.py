"""Stylesheet catalogue for the widget ``style`` option."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from django.conf import settings
from django.templatetags.static import static

DEFAULT_STYLE = "default"


def _style_dir() -> Path:
    return Path(settings.WEATHER_WIDGET_STYLE_DIR)


def available_styles(style_dir: Optional[Path] = None) -> List[str]:
    """Return the names of the shipped stylesheets, without extension."""

    directory = style_dir or _style_dir()
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob("*.css"))


def stylesheet_url(style: str) -> str:
    """Resolve the static URL for ``style``, falling back to the default sheet."""

    if style not in available_styles():
        style = DEFAULT_STYLE
    return static(f"weather_widget/css/{style}.css")
