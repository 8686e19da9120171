"""WeatherAPI temperature resolver."""
from __future__ import annotations

from typing import Any, Optional

from .base import HTTPResolver
from ..context import CallContext
from ..entities import Location
from ..errors import NotFound, TransportError

# Wording of the upstream error; a change on their side turns not-found into 500s.
NO_MATCH_PHRASE = "no matching location found"


def build_query(location: Location) -> str:
    if not location.region:
        return location.city
    return f"{location.city}, {location.region}"


class WeatherApiTemperatureResolver(HTTPResolver):
    name = "weatherapi"
    base_url = "https://api.weatherapi.com/v1"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    def current_celsius(self, location: Location, context: CallContext) -> float:
        params = {"key": self.api_key, "q": build_query(location)}
        response = self._request("GET", f"{self.base_url}/current.json", context, params=params)
        if response.status_code != 200:
            raise self._error_from_response(response)

        payload = self._json(response)
        current = payload.get("current") if isinstance(payload, dict) else None
        temperature = current.get("temp_c") if isinstance(current, dict) else None
        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            raise self._unexpected_status(response, "missing current.temp_c")
        return float(temperature)

    def _error_from_response(self, response) -> TransportError | NotFound:
        try:
            payload = response.json()
        except ValueError:
            return self._unexpected_status(response)

        error = payload.get("error") if isinstance(payload, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        if not isinstance(message, str):
            return self._unexpected_status(response)

        if 400 <= response.status_code < 500 and NO_MATCH_PHRASE in message.lower():
            self._log.info("%s has no matching location", self.name)
            return NotFound()
        return self._unexpected_status(response, message)


__all__ = ["WeatherApiTemperatureResolver", "build_query", "NO_MATCH_PHRASE"]
