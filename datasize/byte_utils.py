"""
datasize/byte_utils.py
----------------------
Conversion between human-readable data sizes ("4567G", "128M", "512") and
exact byte counts, following the convention of `du -h` / `ls -h`.

Features:
- Binary multiples only (1K = 1024 bytes, up to T = 1024⁴)
- Exact Decimal arithmetic on the parse path (no float rounding)
- parse_to_bytes() keeps the -1 "not parseable" contract
- try_parse_bytes() / parse_bytes_strict() for callers that want None or an exception
- format_from_bytes() picks the largest unit where the value is still >= 1
"""

import logging
import re
from decimal import Decimal, localcontext
from types import MappingProxyType
from typing import Any, Mapping, Optional

from datasize.config import settings

logger = logging.getLogger(__name__)


# ---------- Constants ----------
INVALID_SIZE: int = -1

UNIT_MULTIPLIERS: Mapping[str, int] = MappingProxyType({
    "B": 1,
    "K": 1024,
    "M": 1024 ** 2,
    "G": 1024 ** 3,
    "T": 1024 ** 4,
})

# Largest unit first; format_from_bytes walks this until the value fits.
_FORMAT_LADDER = (
    ("TB", UNIT_MULTIPLIERS["T"]),
    ("GB", UNIT_MULTIPLIERS["G"]),
    ("MB", UNIT_MULTIPLIERS["M"]),
    ("KB", UNIT_MULTIPLIERS["K"]),
)

_SIZE_PATTERN = re.compile(
    r"(?P<number>\d+(?:\.\d*)?|\.\d+)(?P<unit>[TGMK])?",
    re.IGNORECASE | re.ASCII,
)


# ---------- Errors ----------
class InvalidDataSizeError(ValueError):
    """Raised by the strict parser when a size string cannot be read."""

    def __init__(self, value: Any, reason: str = "expected <number>[K|M|G|T]"):
        self.value = value
        super().__init__(f"Invalid data size {value!r}: {reason}")


# ---------- Parsing ----------
def unit_multiplier(symbol: str) -> int:
    """
    Look up the byte multiplier for a unit symbol (case-insensitive).

    Raises:
        InvalidDataSizeError: If the symbol is not one of B, K, M, G, T.
    """
    try:
        return UNIT_MULTIPLIERS[symbol.upper()]
    except (KeyError, AttributeError) as e:
        raise InvalidDataSizeError(symbol, "unknown unit") from e


def try_parse_bytes(value: Optional[str]) -> Optional[int]:
    """
    Convert a human-readable size to bytes.

    Args:
        value (str | None): Size such as "4567G", "1.5m" or "42".

    Returns:
        int | None: Byte count (fraction of a byte truncated), or None if the
        value is missing or does not look like a size.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        logger.debug("Rejected non-string data size: %r", value)
        return None

    match = _SIZE_PATTERN.fullmatch(value)
    if not match:
        logger.debug("Rejected data size: %r", value)
        return None

    unit = match.group("unit") or "B"
    literal = match.group("number")
    # wide enough that the product is exact; int() then drops the fraction
    with localcontext() as ctx:
        ctx.prec = len(literal) + 20
        return int(Decimal(literal) * unit_multiplier(unit))


def parse_to_bytes(value: Optional[str]) -> int:
    """
    Convert a human-readable size to bytes.

    Returns -1 (INVALID_SIZE) for missing or malformed input; callers must treat
    it as "unknown", never as a real size.
    """
    result = try_parse_bytes(value)
    return INVALID_SIZE if result is None else result


def parse_bytes_strict(value: Optional[str]) -> int:
    """
    Same grammar as parse_to_bytes(), but bad input is an error.

    Raises:
        InvalidDataSizeError: If the value is missing or malformed.
    """
    if value is None:
        raise InvalidDataSizeError(value, "value is required")
    result = try_parse_bytes(value)
    if result is None:
        raise InvalidDataSizeError(value)
    return result


# ---------- Formatting ----------
def _format_decimal(value: Decimal, precision: int, rounding: str) -> str:
    quantum = Decimal(1).scaleb(-precision)
    rounded = value.quantize(quantum, rounding=rounding)
    if rounded == rounded.to_integral_value():
        return f"{rounded.to_integral_value():f}"
    # "2.50" -> "2.5"
    return f"{rounded:f}".rstrip("0")


def format_from_bytes(
    num_bytes: int,
    precision: Optional[int] = None,
    rounding: Optional[str] = None,
) -> str:
    """
    Format a byte count for display, e.g. 1536 -> "1.5KB".

    Args:
        num_bytes (int): Size in bytes.
        precision (int, optional): Max fractional digits (settings default: 2).
        rounding (str, optional): decimal rounding mode (settings default: ROUND_HALF_EVEN).

    Returns:
        str: "<n>B" below 1024, otherwise the value scaled to the largest unit
        where it is >= 1, with trailing zeros dropped ("2", "2.5", "2.34").
    """
    if precision is None:
        precision = settings.DATASIZE_PRECISION
    if rounding is None:
        rounding = settings.DATASIZE_ROUNDING

    num_bytes = int(num_bytes)
    for suffix, multiplier in _FORMAT_LADDER:
        if num_bytes >= multiplier:
            scaled = Decimal(num_bytes) / Decimal(multiplier)
            return _format_decimal(scaled, precision, rounding) + suffix
    return f"{num_bytes}B"
