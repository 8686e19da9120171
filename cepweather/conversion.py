from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .entities import TemperatureTriple

_ONE = Decimal(1)


def round_one_decimal(value: float) -> float:
    """Round half away from zero on ``value * 10`` then scale back.

    ``Decimal(float)`` is exact, so the tie check sees the real double and
    not its shortest repr. ``ROUND_HALF_UP`` in :mod:`decimal` rounds ties
    away from zero for negative values too.
    """
    scaled = Decimal(value * 10).quantize(_ONE, rounding=ROUND_HALF_UP)
    return float(scaled) / 10


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273


def to_triple(celsius: float) -> TemperatureTriple:
    return TemperatureTriple(
        celsius=round_one_decimal(celsius),
        fahrenheit=round_one_decimal(celsius_to_fahrenheit(celsius)),
        kelvin=round_one_decimal(celsius_to_kelvin(celsius)),
    )


__all__ = ["round_one_decimal", "celsius_to_fahrenheit", "celsius_to_kelvin", "to_triple"]
