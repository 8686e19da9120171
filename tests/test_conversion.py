from __future__ import annotations

import pytest

from cepweather.conversion import round_one_decimal, to_triple
from cepweather.entities import TemperatureTriple


def test_triple_for_known_reading() -> None:
    assert to_triple(25.2) == TemperatureTriple(celsius=25.2, fahrenheit=77.4, kelvin=298.2)


def test_kelvin_offset_is_273() -> None:
    triple = to_triple(28.5)
    assert triple.kelvin == 301.5
    assert triple.fahrenheit == 83.3


@pytest.mark.parametrize(
    "value, expected",
    [
        (25.25, 25.3),
        (-25.25, -25.3),
        (0.05, 0.1),
        (-0.05, -0.1),
        (0.04, 0.0),
        (10.0, 10.0),
    ],
)
def test_rounds_half_away_from_zero(value: float, expected: float) -> None:
    assert round_one_decimal(value) == expected


def test_freezing_point() -> None:
    assert to_triple(0.0) == TemperatureTriple(celsius=0.0, fahrenheit=32.0, kelvin=273.0)


def test_payload_keys() -> None:
    assert to_triple(25.2).as_payload() == {"temp_C": 25.2, "temp_F": 77.4, "temp_K": 298.2}
