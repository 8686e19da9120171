"""Resolve Brazilian postal codes (CEP) to the current temperature."""
from __future__ import annotations

from .entities import Location, TemperatureTriple
from .errors import InvalidFormat, NotFound, RequestCancelled, ResolutionError, TransportError
from .services.resolution import ResolutionService

__all__ = [
    "InvalidFormat",
    "Location",
    "NotFound",
    "RequestCancelled",
    "ResolutionError",
    "ResolutionService",
    "TemperatureTriple",
    "TransportError",
]
