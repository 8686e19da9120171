from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Location:
    """City and region (state code) resolved from a CEP."""

    city: str
    region: str = ""


@dataclass(frozen=True)
class TemperatureTriple:
    """Current temperature in three units, each rounded to one decimal."""

    celsius: float
    fahrenheit: float
    kelvin: float

    def as_payload(self) -> Dict[str, float]:
        return {"temp_C": self.celsius, "temp_F": self.fahrenheit, "temp_K": self.kelvin}


__all__ = ["Location", "TemperatureTriple"]
