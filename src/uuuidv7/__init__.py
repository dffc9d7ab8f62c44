"""
uuuidv7: version 7 UUIDs with sub-millisecond precision.

The usual v7 layout only orders identifiers to the millisecond, so UUIDs
generated in bulk within one millisecond sort randomly. This package packs
a 12-bit fraction of the millisecond next to the timestamp instead:

    >>> import uuuidv7
    >>> uuuidv7.generate()  # doctest: +SKIP
    '018e90d8-06e8-7f9f-bfd7-6730ba98a51b'
    >>> uuuidv7.extract_timestamp("018ecb40-c457-73e6-a400-000398daddd9")
    1712807003223

Only 62 random bits remain per identifier (standard v7 has 74).
"""
from typing import Union

from uuuidv7.config import build_generator, get_generator, reset_generator
from uuuidv7.domain.codec import DecodeError, decode, encode, is_valid
from uuuidv7.domain.generator import (
    Uuid7Generator,
    build_raw,
    scale_nanoseconds,
    split_instant,
)
from uuuidv7.domain.models import UUIDV7_PATTERN, Uuid7Fields, Uuid7Str


def generate() -> str:
    """Generate a UUIDv7 string with the default generator."""
    return get_generator().generate()


def generate_raw() -> bytes:
    """Generate a UUIDv7 as 16 raw bytes with the default generator."""
    return get_generator().generate_raw()


def extract_timestamp(uuid: Union[bytes, str]) -> int:
    """Millisecond timestamp of a raw or text UUIDv7."""
    return get_generator().extract_timestamp(uuid)


def inspect(uuid: Union[bytes, str]) -> Uuid7Fields:
    return get_generator().inspect(uuid)


__all__ = [
    "generate",
    "generate_raw",
    "encode",
    "decode",
    "extract_timestamp",
    "inspect",
    "is_valid",
    "build_raw",
    "scale_nanoseconds",
    "split_instant",
    "DecodeError",
    "Uuid7Fields",
    "Uuid7Generator",
    "Uuid7Str",
    "UUIDV7_PATTERN",
    "build_generator",
    "get_generator",
    "reset_generator",
]
