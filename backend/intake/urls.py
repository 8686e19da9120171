"""URL configuration of the intake front door."""
from __future__ import annotations

from django.urls import path

from backend.health import healthz
from backend.intake.views import CepIntakeView

urlpatterns = [
    path("", CepIntakeView.as_view(), name="intake"),
    path("healthz", healthz, name="healthz"),
]
