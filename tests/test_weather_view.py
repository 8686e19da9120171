from __future__ import annotations

import json

import pytest
import requests
from django.conf import settings
from django.test import Client, override_settings


VIACEP_URL = f"{settings.VIACEP_BASE_URL}/12345678/json/"
WEATHER_URL = f"{settings.WEATHER_API_BASE_URL}/current.json"


@pytest.fixture
def client() -> Client:
    return Client()


def test_weather_endpoint_returns_triple(client, requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json={"localidade": "São Paulo", "uf": "SP"})
    requests_mock.get(WEATHER_URL, json={"current": {"temp_c": 25.2}})

    response = client.get("/weather/12345678")

    assert response.status_code == 200
    assert response["Content-Type"] == "application/json"
    assert response.content == b'{"temp_C":25.2,"temp_F":77.4,"temp_K":298.2}'


def test_weather_endpoint_rejects_invalid_cep(client, requests_mock) -> None:
    response = client.get("/weather/INVALID1")

    assert response.status_code == 422
    assert response.json() == {"message": "invalid zipcode"}
    assert requests_mock.call_count == 0


def test_weather_endpoint_not_found_string_sentinel(client, requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json={"erro": "true"})

    response = client.get("/weather/12345678")

    assert response.status_code == 404
    assert response.json() == {"message": "can not find zipcode"}
    assert requests_mock.call_count == 1


def test_weather_endpoint_not_found_from_weather_provider(client, requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json={"localidade": "Atlantis", "uf": "XX"})
    requests_mock.get(WEATHER_URL, status_code=400, json={"error": {"message": "No matching location found."}})

    response = client.get("/weather/12345678")

    assert response.status_code == 404
    assert response.json() == {"message": "can not find zipcode"}


def test_weather_endpoint_hides_transport_errors(client, requests_mock) -> None:
    requests_mock.get(VIACEP_URL, exc=requests.exceptions.ConnectionError("dns failure"))

    response = client.get("/weather/12345678")

    assert response.status_code == 500
    assert response.json() == {"message": "internal server error"}
    assert "dns" not in response.content.decode()


def test_weather_endpoint_missing_api_key(client, requests_mock) -> None:
    with override_settings(WEATHER_API_KEY=""):
        response = client.get("/weather/12345678")

    assert response.status_code == 500
    assert response.json() == {"message": "internal server error"}


def test_weather_endpoint_empty_cep(client) -> None:
    response = client.get("/weather/")

    assert response.status_code == 404
    assert response.json() == {"message": "not found"}


def test_weather_endpoint_rejects_post(client) -> None:
    response = client.post("/weather/12345678", data=json.dumps({}), content_type="application/json")

    assert response.status_code == 405
    assert response.json() == {"message": "method not allowed"}


def test_healthz(client) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.content == b"ok"


@pytest.mark.parametrize("path", ["/weather/12345678/", "/weather/a/b"])
def test_weather_endpoint_extra_segments_are_invalid(client, requests_mock, path) -> None:
    response = client.get(path)

    assert response.status_code == 422
    assert response.json() == {"message": "invalid zipcode"}
    assert requests_mock.call_count == 0
