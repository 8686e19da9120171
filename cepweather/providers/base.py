from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from ..context import CallContext
from ..errors import RequestCancelled, TransportError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 5.0


def build_session() -> requests.Session:
    """Session shared read-only by every resolver of the process."""
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    return session


class HTTPResolver:
    """Base class adding timeouts and cancellation for HTTP-backed resolvers.

    No retries: a single failed upstream call is final for the request.
    """

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or build_session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _request(self, method: str, url: str, context: CallContext, **kwargs: Any) -> Response:
        context.raise_if_done()
        timeout = context.timeout_for(self.request_config.timeout)
        try:
            response = self.session.request(method, url, timeout=timeout, **kwargs)
        except requests.Timeout as exc:
            if context.expired():
                self._log.warning("Deadline exceeded while calling %s", self.name)
                raise RequestCancelled("deadline exceeded", provider=self.name) from exc
            self._log.error("Request to %s timed out", self.name, exc_info=exc)
            raise TransportError("timeout", provider=self.name) from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", self.name, exc_info=exc)
            raise TransportError("request failed", provider=self.name) from exc

        if context.done():
            # Cancelled or past the deadline while the call was in flight.
            response.close()
            self._log.warning("Discarding %s response, call context is done", self.name)
            context.raise_if_done()
        return response

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON from %s", self.name, exc_info=exc)
            raise TransportError("invalid json", status_code=response.status_code, provider=self.name) from exc

    def _unexpected_status(self, response: Response, detail: Optional[str] = None) -> TransportError:
        self._log.error("%s returned %s: %s", self.name, response.status_code, response.text[:500])
        return TransportError(
            detail or f"unexpected status {response.status_code}",
            status_code=response.status_code,
            provider=self.name,
        )


__all__ = ["HTTPResolver", "RequestConfig", "build_session"]
