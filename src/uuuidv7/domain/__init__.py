"""Domain module: bit layout, codec and generator."""
from .models import Uuid7Fields, Uuid7Str, UUIDV7_PATTERN
from .codec import DecodeError, decode, encode, is_valid
from .generator import (
    Uuid7Generator,
    build_raw,
    extract_timestamp,
    inspect,
    scale_nanoseconds,
    split_instant,
)

__all__ = [
    "Uuid7Fields",
    "Uuid7Str",
    "UUIDV7_PATTERN",
    "DecodeError",
    "decode",
    "encode",
    "is_valid",
    "Uuid7Generator",
    "build_raw",
    "extract_timestamp",
    "inspect",
    "scale_nanoseconds",
    "split_instant",
]
