"""Wiring of the resolution service from Django settings."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from cepweather.providers import (
    RequestConfig,
    ViaCepLocationResolver,
    WeatherApiTemperatureResolver,
    build_session,
)
from cepweather.services.resolution import ResolutionService


@lru_cache(maxsize=1)
def get_resolution_service() -> ResolutionService:
    if not settings.WEATHER_API_KEY:
        raise ImproperlyConfigured("WEATHER_API_KEY environment variable is required")

    # One connection pool for the whole process, shared by both resolvers.
    session = build_session()
    request_config = RequestConfig(timeout=settings.PROVIDER_TIMEOUT)
    return ResolutionService(
        location_resolver=ViaCepLocationResolver(
            base_url=settings.VIACEP_BASE_URL,
            session=session,
            request_config=request_config,
        ),
        temperature_resolver=WeatherApiTemperatureResolver(
            api_key=settings.WEATHER_API_KEY,
            base_url=settings.WEATHER_API_BASE_URL,
            session=session,
            request_config=request_config,
        ),
    )
