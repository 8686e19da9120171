"""ViaCEP location resolver."""
from __future__ import annotations

from typing import Any, Optional

from .base import HTTPResolver
from ..context import CallContext
from ..entities import Location
from ..errors import NotFound


def is_not_found_flag(value: Any) -> bool:
    """ViaCEP reports unknown CEPs as ``"erro": true`` or ``"erro": "true"``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value == "true"
    return False


class ViaCepLocationResolver(HTTPResolver):
    name = "viacep"
    base_url = "https://viacep.com.br/ws"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def lookup(self, cep: str, context: CallContext) -> Location:
        response = self._request("GET", self.lookup_url(cep), context)
        if response.status_code != 200:
            raise self._unexpected_status(response)

        payload = self._json(response)
        if not isinstance(payload, dict):
            raise self._unexpected_status(response, "unexpected payload")

        city = payload.get("localidade") or ""
        if is_not_found_flag(payload.get("erro")) or not city:
            self._log.info("CEP %s not found", cep)
            raise NotFound()

        return Location(city=city, region=payload.get("uf") or "")

    def lookup_url(self, cep: str) -> str:
        return f"{self.base_url}/{cep}/json/"


__all__ = ["ViaCepLocationResolver", "is_not_found_flag"]
