"""Capabilities the resolution service depends on."""
from __future__ import annotations

from typing import Protocol

from .context import CallContext
from .entities import Location


class LocationResolver(Protocol):
    """Maps a normalized CEP to a :class:`Location`."""

    name: str

    def lookup(self, cep: str, context: CallContext) -> Location:
        """Raise ``NotFound`` for unknown CEPs and ``TransportError`` otherwise."""
        ...


class TemperatureResolver(Protocol):
    """Returns the current Celsius reading for a location."""

    name: str

    def current_celsius(self, location: Location, context: CallContext) -> float:
        """Raise ``NotFound`` when the upstream has no match for the location."""
        ...


__all__ = ["LocationResolver", "TemperatureResolver"]
