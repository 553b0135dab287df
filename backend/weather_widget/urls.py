from __future__ import annotations

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from . import views
from .api_views import OptionViewSet

app_name = "weather_widget"

router = DefaultRouter()
router.register("options", OptionViewSet, basename="option")

urlpatterns = [
    path("settings/", views.settings_view, name="settings"),
    path("widget/", views.widget_view, name="widget"),
    path("sidebar/", views.sidebar_view, name="sidebar"),
    path("widgets/<int:pk>/", views.widget_instance_edit, name="widget-instance"),
    path("api/", include(router.urls)),
]
