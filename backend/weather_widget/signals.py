"""Option change notifications and the widget settings synchronizer."""

from __future__ import annotations

import logging
from typing import Any

from django.db.models.signals import post_save
from django.dispatch import Signal, receiver

from .models import WidgetInstance

logger = logging.getLogger(__name__)

# Sent with ``option_name`` and ``value`` when an option row is created.
option_added = Signal()
# Sent with ``option_name``, ``old_value`` and ``value`` after an update.
option_updated = Signal()


def sync_option_to_widgets(option_name: str, value: str) -> int:
    """Copy a widget option into the settings blob of every placed widget.

    Options outside the widget prefix are ignored. Returns the number of
    widget instances rewritten.
    """

    from .options import bare_option_name

    field = bare_option_name(option_name)
    if field is None:
        return 0

    widgets = list(WidgetInstance.objects.all())
    if not widgets:
        return 0

    updated = []
    for widget in widgets:
        if not isinstance(widget.settings, dict):
            continue
        widget.settings[field] = value
        updated.append(widget)

    WidgetInstance.objects.bulk_update(updated, ["settings"])
    logger.debug("Synced %s to %d widget instance(s)", field, len(updated))
    return len(updated)


@receiver(option_added)
def _on_option_added(sender: Any, option_name: str, value: str, **kwargs: Any) -> None:
    sync_option_to_widgets(option_name, value)


@receiver(option_updated)
def _on_option_updated(
    sender: Any, option_name: str, old_value: str, value: str, **kwargs: Any
) -> None:
    sync_option_to_widgets(option_name, value)


@receiver(post_save, sender=WidgetInstance)
def _seed_new_widget(sender: Any, instance: WidgetInstance, created: bool, **kwargs: Any) -> None:
    """Give a freshly placed widget the current plugin-wide options."""

    if not created or not isinstance(instance.settings, dict):
        return

    from .options import SettingsStore

    seeded = dict(SettingsStore().as_dict())
    seeded.update(instance.settings)
    if seeded != instance.settings:
        instance.settings = seeded
        WidgetInstance.objects.filter(pk=instance.pk).update(settings=seeded)
