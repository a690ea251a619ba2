"""Human-readable data sizes ("4567G", "1.5KB") <-> exact byte counts."""

from datasize.byte_utils import (
    INVALID_SIZE,
    UNIT_MULTIPLIERS,
    InvalidDataSizeError,
    format_from_bytes,
    parse_bytes_strict,
    parse_to_bytes,
    try_parse_bytes,
    unit_multiplier,
)
from datasize.config import Settings, configure_logging, settings
from datasize.fields import DataSizeBytes, HumanDataSize

__all__ = [
    "INVALID_SIZE",
    "UNIT_MULTIPLIERS",
    "InvalidDataSizeError",
    "format_from_bytes",
    "parse_bytes_strict",
    "parse_to_bytes",
    "try_parse_bytes",
    "unit_multiplier",
    "Settings",
    "configure_logging",
    "settings",
    "DataSizeBytes",
    "HumanDataSize",
]
