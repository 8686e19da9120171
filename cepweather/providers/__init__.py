from __future__ import annotations

from .base import HTTPResolver, RequestConfig, build_session
from .viacep import ViaCepLocationResolver
from .weatherapi import WeatherApiTemperatureResolver, build_query

__all__ = [
    "HTTPResolver",
    "RequestConfig",
    "ViaCepLocationResolver",
    "WeatherApiTemperatureResolver",
    "build_query",
    "build_session",
]
