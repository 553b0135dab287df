"""Serializers for the widget options API."""

from __future__ import annotations

from typing import Any, Dict

from rest_framework import serializers

from .models import Option
from .options import CHECKED, UNCHECKED, UNIT_CHOICES, SettingsStore, bare_option_name
from .settings_fields import CHECKBOX, iter_fields
from .styles import available_styles

MASKED_OPTIONS = {"api_key"}

_CHECKBOX_OPTIONS = {descriptor.name for descriptor in iter_fields() if descriptor.kind == CHECKBOX}


def _mask(value: str) -> str:
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


class OptionSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    value = serializers.CharField(allow_blank=True, trim_whitespace=True)

    class Meta:
        model = Option
        fields = ["name", "value", "updated_at"]
        read_only_fields = ["updated_at"]

    def get_name(self, obj: Option) -> str:
        return bare_option_name(obj.name) or obj.name

    def to_representation(self, instance: Option) -> Dict[str, Any]:
        data = super().to_representation(instance)
        if data["name"] in MASKED_OPTIONS and data["value"]:
            data["value"] = _mask(data["value"])
        return data

    def validate_value(self, value: str) -> str:
        if self.instance is None:
            return value
        name = bare_option_name(self.instance.name)
        if name == "units" and value not in UNIT_CHOICES:
            raise serializers.ValidationError(
                f"Units must be one of: {', '.join(UNIT_CHOICES)}."
            )
        if name == "style" and value not in available_styles():
            raise serializers.ValidationError(f"Unknown style '{value}'.")
        if name in _CHECKBOX_OPTIONS and value not in (CHECKED, UNCHECKED, ""):
            raise serializers.ValidationError("Checkbox options accept 'on' or 'off'.")
        return value

    def update(self, instance: Option, validated_data: Dict[str, Any]) -> Option:
        if "value" not in validated_data:
            return instance
        # Writes go through the store so the widget synchronizer sees them.
        SettingsStore().set(bare_option_name(instance.name), validated_data["value"])
        instance.refresh_from_db()
        return instance
