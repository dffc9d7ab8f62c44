"""Version 7 UUID generator with sub-millisecond ordering.

The standard layout fills the 12 bits after the version nibble with random
data, so identifiers minted within the same millisecond sort arbitrarily.
Here those 12 bits carry the fraction of the current millisecond (scaled
from nanoseconds into 4096 buckets of ~244ns), leaving 62 random bits.
Identifiers generated at least ~244ns apart therefore sort in
generation order both as bytes and as text, at the cost of 12 bits of
collision resistance compared with a standard v7 UUID.
"""
import logging
from typing import Tuple, Union

from .codec import DecodeError, decode, encode
from .models import (
    FRAC_BUCKETS,
    FRAC_MASK,
    FRAC_SHIFT,
    NANOSECONDS_PER_MILLISECOND,
    RANDOM_MASK,
    RAW_LENGTH,
    TIMESTAMP_MASK,
    TIMESTAMP_SHIFT,
    VARIANT,
    VARIANT_MASK,
    VARIANT_SHIFT,
    VERSION,
    VERSION_MASK,
    VERSION_SHIFT,
    Uuid7Fields,
)
from ..ports.clock import Clock
from ..ports.entropy import EntropySource

logger = logging.getLogger(__name__)

RANDOM_BYTES = 8


def scale_nanoseconds(nanos: int) -> int:
    """
    Scale nanoseconds within a millisecond onto the 12-bit fraction.

    0 -> 0, 500_000 -> 2048, 999_999 -> 0xFFF. Out-of-range input is clamped.
    """
    frac = nanos * FRAC_BUCKETS // NANOSECONDS_PER_MILLISECOND
    return max(0, min(frac, FRAC_MASK))


def split_instant(instant_ns: int) -> Tuple[int, int]:
    """Split a nanosecond instant into (timestamp_ms, frac)."""
    milliseconds, remaining_nanos = divmod(instant_ns, NANOSECONDS_PER_MILLISECOND)
    if milliseconds < 0 or milliseconds > TIMESTAMP_MASK:
        logger.warning(f"Clock instant {instant_ns}ns is outside the 48-bit millisecond range")
    return milliseconds & TIMESTAMP_MASK, scale_nanoseconds(remaining_nanos)


def build_raw(timestamp_ms: int, frac: int, random: int) -> bytes:
    """Assemble the 128-bit layout from its variable fields."""
    if not 0 <= timestamp_ms <= TIMESTAMP_MASK:
        raise ValueError(f"timestamp_ms out of 48-bit range: {timestamp_ms}")
    if not 0 <= frac <= FRAC_MASK:
        raise ValueError(f"frac out of 12-bit range: {frac}")
    if not 0 <= random <= RANDOM_MASK:
        raise ValueError(f"random out of 62-bit range: {random}")

    uuid_int = timestamp_ms << TIMESTAMP_SHIFT
    uuid_int |= VERSION << VERSION_SHIFT
    uuid_int |= frac << FRAC_SHIFT
    uuid_int |= VARIANT << VARIANT_SHIFT
    uuid_int |= random
    return uuid_int.to_bytes(RAW_LENGTH, "big")


def _to_raw(uuid: Union[bytes, str]) -> bytes:
    if isinstance(uuid, str):
        return decode(uuid)
    if isinstance(uuid, (bytes, bytearray)):
        if len(uuid) != RAW_LENGTH:
            raise DecodeError(f"Raw identifier must be {RAW_LENGTH} bytes, got {len(uuid)}", "LENGTH")
        return bytes(uuid)
    raise DecodeError(f"Expected bytes or str, got {type(uuid).__name__}", "TYPE")


def inspect(uuid: Union[bytes, str]) -> Uuid7Fields:
    """Unpack every bit field. Does not require version 7."""
    raw = _to_raw(uuid)
    uuid_int = int.from_bytes(raw, "big")
    return Uuid7Fields(
        text=encode(raw),
        timestamp_ms=(uuid_int >> TIMESTAMP_SHIFT) & TIMESTAMP_MASK,
        version=(uuid_int >> VERSION_SHIFT) & VERSION_MASK,
        frac=(uuid_int >> FRAC_SHIFT) & FRAC_MASK,
        variant=(uuid_int >> VARIANT_SHIFT) & VARIANT_MASK,
        random=uuid_int & RANDOM_MASK,
    )


def extract_timestamp(uuid: Union[bytes, str], strict: bool = True) -> int:
    """
    Extract the millisecond timestamp from a raw or text identifier.

    With strict set, identifiers that do not carry version 7 and the
    RFC variant are rejected.
    """
    fields = inspect(uuid)
    if strict and not fields.is_version7:
        raise DecodeError(
            f"Not a version 7 UUID: version={fields.version}, variant={fields.variant:#04b}",
            "NOT_VERSION_7"
        )
    return fields.timestamp_ms


class Uuid7Generator:
    """
    Builds identifiers from a clock and an entropy source.

    Holds no mutable state of its own; safe to share across threads as long
    as the providers are.
    """

    def __init__(
        self,
        clock: Clock,
        entropy: EntropySource,
        strict: bool = True
    ):
        self.clock = clock
        self.entropy = entropy
        self.strict = strict

    def get_time(self) -> Tuple[int, int]:
        """Current time as (timestamp_ms, frac)."""
        return split_instant(self.clock.now_ns())

    def generate_raw(self) -> bytes:
        """Generate a new identifier as 16 raw bytes."""
        milliseconds, frac = self.get_time()
        # Low 62 bits of 8 random bytes
        rand = int.from_bytes(self.entropy.token_bytes(RANDOM_BYTES), "big") & RANDOM_MASK
        return build_raw(milliseconds, frac, rand)

    def generate(self) -> str:
        """Generate a new identifier in canonical text form."""
        return encode(self.generate_raw())

    def extract_timestamp(self, uuid: Union[bytes, str]) -> int:
        return extract_timestamp(uuid, strict=self.strict)

    def inspect(self, uuid: Union[bytes, str]) -> Uuid7Fields:
        return inspect(uuid)
