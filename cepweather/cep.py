from __future__ import annotations

import re
from typing import Any

from .errors import InvalidFormat

# ASCII only: ``\d`` would also accept other Unicode decimal digits.
CEP_PATTERN = re.compile(r"^[0-9]{8}$")


def is_valid_cep(value: Any) -> bool:
    """Shape check without trimming, used at the intake edge."""
    return isinstance(value, str) and CEP_PATTERN.fullmatch(value) is not None


def normalize_cep(raw: Any) -> str:
    """Strip surrounding whitespace and require exactly eight digits."""
    if not isinstance(raw, str):
        raise InvalidFormat()
    cleaned = raw.strip()
    if not CEP_PATTERN.fullmatch(cleaned):
        raise InvalidFormat()
    return cleaned


__all__ = ["CEP_PATTERN", "is_valid_cep", "normalize_cep"]
