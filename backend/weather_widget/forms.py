from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from django import forms
from django.utils.html import strip_tags

from .models import WidgetInstance
from .options import CHECKED, UNCHECKED, SettingsStore
from .settings_fields import CHECKBOX, SECTIONS, SELECT, FieldDescriptor, Section, iter_fields


def _build_field(descriptor: FieldDescriptor, store: SettingsStore) -> forms.Field:
    current = store.get(descriptor.name, descriptor.default)

    if descriptor.kind == CHECKBOX:
        return forms.BooleanField(
            label=descriptor.label,
            required=False,
            initial=current == CHECKED,
            help_text=descriptor.note,
            widget=forms.CheckboxInput(attrs={"class": "form-check-input"}),
        )

    if descriptor.kind == SELECT:
        return forms.ChoiceField(
            label=descriptor.label,
            required=False,
            choices=descriptor.get_choices(),
            initial=current,
            help_text=descriptor.note,
            widget=forms.Select(attrs={"class": "form-select"}),
        )

    return forms.CharField(
        label=descriptor.label,
        required=False,
        initial=current,
        help_text=descriptor.note,
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )


class OptionsForm(forms.Form):
    """Edit every widget option, grouped the way the options page shows them."""

    def __init__(self, *args, store: Optional[SettingsStore] = None, **kwargs) -> None:
        self.store = store or SettingsStore()
        super().__init__(*args, **kwargs)
        for descriptor in iter_fields():
            self.fields[descriptor.name] = _build_field(descriptor, self.store)

    def sections(self) -> Iterator[Tuple[Section, List[forms.BoundField]]]:
        for section in SECTIONS:
            yield section, [self[descriptor.name] for descriptor in section.fields]

    @property
    def missing_required(self) -> bool:
        """The widget cannot fetch anything without an API key and a ZIP code."""

        return not self.store.get("api_key") or not self.store.get("zipcode")

    def save(self) -> None:
        for descriptor in iter_fields():
            value = self.cleaned_data.get(descriptor.name)
            if descriptor.kind == CHECKBOX:
                value = CHECKED if value else UNCHECKED
            elif descriptor.kind == SELECT and not value:
                # Nothing selectable was posted; keep what is stored.
                continue
            self.store.set(descriptor.name, value or "")


class WidgetInstanceForm(forms.Form):
    """Location fields shown when configuring a placed widget.

    Saving writes the values through to the plugin-wide options, so every
    placed widget ends up showing the same location.
    """

    country_code = forms.CharField(
        label="Country Code:",
        required=False,
        widget=forms.TextInput(attrs={"class": "widefat"}),
    )
    zipcode = forms.CharField(
        label="ZIP Code:",
        required=False,
        widget=forms.TextInput(attrs={"class": "widefat"}),
    )

    def __init__(self, *args, instance: WidgetInstance, store: Optional[SettingsStore] = None, **kwargs) -> None:
        self.instance = instance
        self.store = store or SettingsStore()
        blob = instance.settings if isinstance(instance.settings, dict) else {}
        kwargs.setdefault(
            "initial",
            {
                "country_code": blob.get("country_code") or "",
                "zipcode": blob.get("zipcode") or "",
            },
        )
        super().__init__(*args, **kwargs)

    def clean_country_code(self) -> str:
        return strip_tags(self.cleaned_data.get("country_code") or "")

    def clean_zipcode(self) -> str:
        return strip_tags(self.cleaned_data.get("zipcode") or "")

    def save(self) -> WidgetInstance:
        country_code = self.cleaned_data["country_code"]
        zipcode = self.cleaned_data["zipcode"]

        blob = self.instance.settings if isinstance(self.instance.settings, dict) else {}
        blob.update({"country_code": country_code, "zipcode": zipcode})
        self.instance.settings = blob
        self.instance.save(update_fields=["settings", "updated_at"])

        self.store.set("country_code", country_code)
        self.store.set("zipcode", zipcode)
        self.instance.refresh_from_db()
        return self.instance
