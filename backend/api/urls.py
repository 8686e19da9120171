"""API URL configuration."""
from __future__ import annotations

from django.urls import re_path

from backend.api.views import WeatherView

urlpatterns = [
    re_path(r"^weather/(?P<cep>.*)$", WeatherView.as_view(), name="weather"),
]
