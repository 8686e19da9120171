from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")
os.environ.setdefault("WEATHER_API_KEY", "test-key")
os.environ.setdefault("SERVICE_ROLE", "resolution")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def _fresh_clients():
    from backend.api.services import get_resolution_service
    from backend.intake.views import get_resolution_client

    get_resolution_service.cache_clear()
    get_resolution_client.cache_clear()
    yield
    get_resolution_service.cache_clear()
    get_resolution_client.cache_clear()
