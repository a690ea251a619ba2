"""
datasize/fields.py
------------------
Pydantic types for configuration models that take sizes like "512M".

- DataSizeBytes: validates an int or a size string into a byte count
- HumanDataSize: same validation, serializes back to "1.5GB" style text
"""

from typing import Annotated, Union

from pydantic import BeforeValidator, PlainSerializer

from datasize.byte_utils import format_from_bytes, parse_bytes_strict


def to_bytes(value: Union[int, str]) -> int:
    """Pydantic before-validator: accept a non-negative int or a size string."""
    if isinstance(value, bool):
        raise ValueError("data size must be an integer or a size string")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("Negative values are not allowed for data sizes.")
        return value
    # InvalidDataSizeError is a ValueError, so pydantic reports it as a validation error
    return parse_bytes_strict(value)


def to_human(num_bytes: int) -> str:
    return format_from_bytes(num_bytes)


DataSizeBytes = Annotated[int, BeforeValidator(to_bytes)]

HumanDataSize = Annotated[
    int,
    BeforeValidator(to_bytes),
    PlainSerializer(to_human, return_type=str),
]
