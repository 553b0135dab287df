from __future__ import annotations

from django.contrib import messages
from django.contrib.auth.decorators import user_passes_test
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect, render

from .forms import OptionsForm, WidgetInstanceForm
from .models import WidgetInstance
from .options import SettingsStore
from .rendering import render_widget
from .styles import stylesheet_url

staff_required = user_passes_test(lambda user: user.is_active and user.is_staff)


@staff_required
def settings_view(request):
    """Show and save the plugin-wide widget options."""

    form = OptionsForm(request.POST or None, store=SettingsStore())

    if request.method == "POST":
        if form.is_valid():
            form.save()
            messages.success(request, "Settings saved.")
            return redirect("weather_widget:settings")
        messages.error(request, "Please correct the highlighted settings.")

    return render(request, "weather_widget/settings.html", {"form": form})


def widget_view(request):
    """Return the rendered widget fragment for embedding in a sidebar."""

    return HttpResponse(render_widget(SettingsStore()))


def sidebar_view(request):
    """Render a page with the widget stylesheet linked and the widget embedded."""

    store = SettingsStore()
    return render(
        request,
        "weather_widget/sidebar.html",
        {
            "stylesheet_url": stylesheet_url(store.get("style")),
            "widget_html": render_widget(store),
        },
    )


@staff_required
def widget_instance_edit(request, pk: int):
    """Edit the location of one placed widget."""

    instance = get_object_or_404(WidgetInstance, pk=pk)
    form = WidgetInstanceForm(request.POST or None, instance=instance, store=SettingsStore())

    if request.method == "POST":
        if form.is_valid():
            form.save()
            messages.success(request, "Widget location saved.")
            return redirect("weather_widget:widget-instance", pk=instance.pk)
        messages.error(request, "Please correct the widget location.")

    return render(
        request,
        "weather_widget/widget_instance_form.html",
        {"form": form, "instance": instance},
    )
