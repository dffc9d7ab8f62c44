"""Binary/text codec for 128-bit identifiers.

Raw form is 16 big-endian bytes; text form is the canonical 36-character
8-4-4-4-12 hex string. Encode always emits lowercase, decode accepts either
case and rejects anything malformed outright.
"""
import logging

from .models import RAW_LENGTH, TEXT_LENGTH

logger = logging.getLogger(__name__)

# Nibble -> character
ENCODE_TABLE = "0123456789abcdef"

# Character -> nibble, both cases
DECODE_TABLE = {char: value for value, char in enumerate(ENCODE_TABLE)}
DECODE_TABLE.update({char.upper(): value for char, value in list(DECODE_TABLE.items())})

# Hex-digit positions after which a hyphen is emitted
HYPHEN_AFTER = (8, 12, 16, 20)
# Indices of the hyphens in the 36-character text
HYPHEN_POSITIONS = frozenset(pos + i for i, pos in enumerate(HYPHEN_AFTER))


class DecodeError(ValueError):
    def __init__(self, message: str, code: str = "DECODE_INVALID"):
        super().__init__(message)
        self.message = message
        self.code = code


def encode(raw: bytes) -> str:
    """Encode 16 raw bytes as a lowercase hyphenated hex string."""
    if len(raw) != RAW_LENGTH:
        raise ValueError(f"Raw identifier must be {RAW_LENGTH} bytes, got {len(raw)}")

    chars = []
    for index, byte in enumerate(raw):
        chars.append(ENCODE_TABLE[byte >> 4])
        chars.append(ENCODE_TABLE[byte & 0xF])
        if (index + 1) * 2 in HYPHEN_AFTER:
            chars.append("-")
    return "".join(chars)


def decode(text: str) -> bytes:
    """
    Decode the 36-character text form back into 16 raw bytes.

    Raises DecodeError for the wrong type or length, a missing or misplaced
    hyphen, or a non-hex character in a digit position.
    """
    if not isinstance(text, str):
        raise DecodeError(f"Expected str, got {type(text).__name__}", "TYPE")

    if len(text) != TEXT_LENGTH:
        logger.debug(f"Rejected identifier of length {len(text)}")
        raise DecodeError(f"Identifier must be {TEXT_LENGTH} characters, got {len(text)}", "LENGTH")

    value = 0
    for index, char in enumerate(text):
        if index in HYPHEN_POSITIONS:
            if char != "-":
                logger.debug(f"Rejected identifier {text!r}: expected '-' at {index}")
                raise DecodeError(f"Expected '-' at position {index}, got {char!r}", "HYPHEN")
            continue

        nibble = DECODE_TABLE.get(char)
        if nibble is None:
            logger.debug(f"Rejected identifier {text!r}: invalid hex digit at {index}")
            raise DecodeError(f"Invalid hex digit {char!r} at position {index}", "HEX_DIGIT")
        value = (value << 4) | nibble

    return value.to_bytes(RAW_LENGTH, "big")


def is_valid(text: str) -> bool:
    try:
        decode(text)
    except DecodeError:
        return False
    return True
