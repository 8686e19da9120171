"""Error taxonomy shared by the resolvers, the orchestrator and the HTTP layer.

Only three kinds reach callers: a malformed identifier, an identifier (or
location) the upstream explicitly does not know, and everything else.
"""
from __future__ import annotations

from typing import Optional


class ResolutionError(RuntimeError):
    """Base error; ``message`` is the text safe to show to API clients."""

    message = "internal server error"

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class InvalidFormat(ResolutionError):
    message = "invalid zipcode"


class NotFound(ResolutionError):
    message = "can not find zipcode"


class TransportError(ResolutionError):
    """Network failure, unexpected status or malformed upstream payload."""

    def __init__(
        self,
        detail: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        provider: Optional[str] = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.provider = provider

    def __str__(self) -> str:
        parts = [self.detail]
        if self.provider:
            parts.insert(0, f"{self.provider}:")
        if self.status_code is not None:
            parts.append(f"(status {self.status_code})")
        return " ".join(parts)


class RequestCancelled(TransportError):
    """The call context was cancelled or its deadline passed."""


__all__ = ["ResolutionError", "InvalidFormat", "NotFound", "TransportError", "RequestCancelled"]
