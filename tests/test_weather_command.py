from __future__ import annotations

import json
from io import StringIO

import pytest
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError


VIACEP_URL = f"{settings.VIACEP_BASE_URL}/01001000/json/"
WEATHER_URL = f"{settings.WEATHER_API_BASE_URL}/current.json"


def test_command_prints_triple(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json={"localidade": "São Paulo", "uf": "SP"})
    requests_mock.get(WEATHER_URL, json={"current": {"temp_c": 28.5}})
    out = StringIO()

    call_command("weather_by_cep", "01001000", stdout=out)

    assert json.loads(out.getvalue()) == {"temp_C": 28.5, "temp_F": 83.3, "temp_K": 301.5}


def test_command_rejects_invalid_cep(requests_mock) -> None:
    with pytest.raises(CommandError, match="invalid zipcode"):
        call_command("weather_by_cep", "0100-1000")

    assert requests_mock.call_count == 0


def test_command_reports_transport_errors(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, status_code=502, text="bad gateway")

    with pytest.raises(CommandError, match="status 502"):
        call_command("weather_by_cep", "01001000")
