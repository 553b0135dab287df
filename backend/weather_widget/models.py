from __future__ import annotations

from django.db import models


class Option(models.Model):
    """A single string-valued widget option, stored under its prefixed name."""

    name = models.CharField(max_length=191, unique=True)
    value = models.TextField(blank=True, default="")

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:  # pragma: no cover - human readable representation
        return self.name


class WidgetInstance(models.Model):
    """A widget placed in a sidebar together with its legacy settings blob.

    ``settings`` mirrors the plugin-wide options (bare names, no prefix) so
    placements created before the options page existed keep rendering with
    current values. Anything other than a JSON object is treated as malformed
    and left untouched by the option synchronizer.
    """

    sidebar = models.CharField(max_length=100, default="sidebar-1")
    position = models.PositiveIntegerField(default=0)
    settings = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["position", "pk"]

    def __str__(self) -> str:  # pragma: no cover - human readable representation
        return f"Weather widget #{self.pk} ({self.sidebar})"
