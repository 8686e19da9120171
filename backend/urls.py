"""URL configuration of the resolution service."""
from __future__ import annotations

from django.urls import include, path

from backend.health import healthz

urlpatterns = [
    path("", include("backend.api.urls")),
    path("healthz", healthz, name="healthz"),
]
