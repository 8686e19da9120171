"""HTTP client the intake front door uses to reach the resolution service."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from cepweather.errors import TransportError


logger = logging.getLogger(__name__)


class ResolutionServiceClient:
    name = "resolution-service"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def forward(self, cep: str) -> requests.Response:
        """GET ``/weather/<cep>`` and return the response whatever its status."""
        url = f"{self.base_url}/weather/{cep}"
        try:
            return self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Forwarding to %s failed", url, exc_info=exc)
            raise TransportError("forwarding failed", provider=self.name) from exc
