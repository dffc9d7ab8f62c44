from pydantic import BaseModel, Field, ConfigDict
from typing import Annotated
from datetime import datetime, timedelta, timezone

# Bit layout, most significant first:
# | timestamp_ms (48) | version (4) | frac (12) | variant (2) | random (62) |
TIMESTAMP_BITS = 48
VERSION_BITS = 4
FRAC_BITS = 12
VARIANT_BITS = 2
RANDOM_BITS = 62

TIMESTAMP_SHIFT = 80
VERSION_SHIFT = 76
FRAC_SHIFT = 64
VARIANT_SHIFT = 62

TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1
VERSION_MASK = (1 << VERSION_BITS) - 1
FRAC_MASK = (1 << FRAC_BITS) - 1
VARIANT_MASK = (1 << VARIANT_BITS) - 1
RANDOM_MASK = (1 << RANDOM_BITS) - 1

VERSION = 0x7
VARIANT = 0x2

NANOSECONDS_PER_MILLISECOND = 1_000_000
# 1,000,000 nanoseconds mapped onto 4096 buckets (~244ns each)
FRAC_BUCKETS = 1 << FRAC_BITS

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

RAW_LENGTH = 16
TEXT_LENGTH = 36

# Strict Validation Patterns
# UUIDv7: 8 chars, 4 chars, 4 chars (started 7), 4 chars (variant 89ab), 12 chars
UUIDV7_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"

Uuid7Str = Annotated[str, Field(pattern=UUIDV7_PATTERN)]


class Uuid7Fields(BaseModel):
    """Bit fields unpacked from a 128-bit identifier."""
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid"
    )

    text: str = Field(min_length=TEXT_LENGTH, max_length=TEXT_LENGTH)
    timestamp_ms: int = Field(ge=0, le=TIMESTAMP_MASK)
    version: int = Field(ge=0, le=VERSION_MASK)
    frac: int = Field(ge=0, le=FRAC_MASK)
    variant: int = Field(ge=0, le=VARIANT_MASK)
    random: int = Field(ge=0, le=RANDOM_MASK)

    @property
    def is_version7(self) -> bool:
        return self.version == VERSION and self.variant == VARIANT

    @property
    def timestamp(self) -> datetime:
        """
        Millisecond timestamp as an aware UTC datetime.

        Raises OverflowError past 9999-12-31, which the 48-bit field can exceed.
        """
        try:
            return UNIX_EPOCH + timedelta(milliseconds=self.timestamp_ms)
        except OverflowError as e:
            raise OverflowError(
                f"timestamp_ms {self.timestamp_ms} is beyond datetime range (year 9999)"
            ) from e

    @property
    def submillisecond_ns(self) -> int:
        """Lower bound, in nanoseconds, of the fraction bucket."""
        return self.frac * NANOSECONDS_PER_MILLISECOND // FRAC_BUCKETS

    @property
    def instant_ns(self) -> int:
        """Approximate generation instant (to ~244ns) in nanoseconds since the epoch."""
        return self.timestamp_ms * NANOSECONDS_PER_MILLISECOND + self.submillisecond_ns
