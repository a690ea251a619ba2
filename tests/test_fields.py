from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from datasize.fields import DataSizeBytes, HumanDataSize


class CacheConfig(BaseModel):
    max_size: DataSizeBytes
    segment_size: Optional[DataSizeBytes] = None


class QuotaReport(BaseModel):
    used: HumanDataSize


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("128M", 128 * 1024 ** 2),
        ("4567g", 4567 * 1024 ** 3),
        ("512", 512),
        (4096, 4096),
        (0, 0),
    ],
)
def test_data_size_bytes_accepts(raw, expected):
    assert CacheConfig(max_size=raw).max_size == expected


@pytest.mark.parametrize("raw", ["10X", "", "-1", -1, True, 1.5])
def test_data_size_bytes_rejects(raw):
    with pytest.raises(ValidationError):
        CacheConfig(max_size=raw)


def test_error_message_names_value():
    with pytest.raises(ValidationError, match="Invalid data size '10X'"):
        CacheConfig(max_size="10X")


def test_optional_field():
    cfg = CacheConfig(max_size="1G")
    assert cfg.segment_size is None
    assert CacheConfig(max_size="1G", segment_size="64K").segment_size == 65536


def test_human_data_size_serializes():
    report = QuotaReport(used="1536")
    assert report.used == 1536
    assert report.model_dump() == {"used": "1.5KB"}
    assert report.model_dump_json() == '{"used":"1.5KB"}'
