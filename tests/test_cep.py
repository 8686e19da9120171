from __future__ import annotations

import pytest

from cepweather.cep import is_valid_cep, normalize_cep
from cepweather.errors import InvalidFormat


@pytest.mark.parametrize("raw", ["12345678", " 12345678", "12345678\n", "\t01001000 "])
def test_normalize_strips_whitespace(raw: str) -> None:
    assert normalize_cep(raw) == raw.strip()


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "1234567",
        "123456789",
        "12345-678",
        "INVALID1",
        "1234 5678",
        "١٢٣٤٥٦٧٨",  # Arabic-Indic digits
        None,
        12345678,
    ],
)
def test_normalize_rejects_malformed(raw) -> None:
    with pytest.raises(InvalidFormat) as excinfo:
        normalize_cep(raw)
    assert excinfo.value.message == "invalid zipcode"


def test_edge_check_does_not_trim() -> None:
    assert is_valid_cep("12345678")
    assert not is_valid_cep(" 12345678")
    assert not is_valid_cep(12345678)
