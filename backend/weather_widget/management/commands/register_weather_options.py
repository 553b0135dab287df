from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand

from ...options import register_default_options


class Command(BaseCommand):
    help = "Create any missing weather widget options with their defaults and sync placed widgets"

    def handle(self, *args: Any, **options: Any) -> None:
        created = register_default_options()
        self.stdout.write(self.style.SUCCESS(f"Registered {created} new option(s)"))
