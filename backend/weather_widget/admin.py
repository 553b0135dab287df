from __future__ import annotations

from django.contrib import admin

from .models import Option, WidgetInstance
from .options import SettingsStore, bare_option_name


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    list_display = ("name", "value", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("name", "updated_at")

    def has_add_permission(self, request) -> bool:
        # Options are created on activation only.
        return False

    def save_model(self, request, obj, form, change) -> None:
        name = bare_option_name(obj.name)
        if name is None:
            super().save_model(request, obj, form, change)
            return
        # Route through the store so placed widgets are kept in sync.
        SettingsStore().set(name, obj.value)


@admin.register(WidgetInstance)
class WidgetInstanceAdmin(admin.ModelAdmin):
    list_display = ("id", "sidebar", "position", "updated_at")
    list_filter = ("sidebar",)
    ordering = ("position", "pk")
