import secrets
import pytest
from uuuidv7.domain.codec import DecodeError, decode, encode, is_valid

# Test constants
KNOWN_RAW = bytes([1, 142, 144, 216, 6, 232, 127, 159, 191, 215, 103, 48, 186, 152, 165, 27])
KNOWN_TEXT = "018e90d8-06e8-7f9f-bfd7-6730ba98a51b"


def test_encode_known_vector():
    assert encode(KNOWN_RAW) == KNOWN_TEXT


def test_decode_known_vector():
    assert decode(KNOWN_TEXT) == KNOWN_RAW


def test_encode_layout():
    text = encode(bytes(range(16)))
    assert text == "00010203-0405-0607-0809-0a0b0c0d0e0f"
    assert len(text) == 36
    assert [i for i, c in enumerate(text) if c == "-"] == [8, 13, 18, 23]


@pytest.mark.parametrize("raw", [bytes(16), b"\xff" * 16, KNOWN_RAW])
def test_raw_round_trip_edges(raw):
    assert decode(encode(raw)) == raw


def test_raw_round_trip_random():
    for _ in range(1000):
        raw = secrets.token_bytes(16)
        assert decode(encode(raw)) == raw


def test_decode_accepts_uppercase_and_encode_lowercases():
    upper = "018ECB40-C457-73E6-A400-000398DADDD9"
    mixed = "018eCb40-C457-73e6-A400-000398dAdDd9"
    assert encode(decode(upper)) == upper.lower()
    assert encode(decode(mixed)) == mixed.lower()
    assert decode(upper) == decode(mixed)


@pytest.mark.parametrize("text,code", [
    ("", "LENGTH"),
    ("018e90d8-06e8-7f9f-bfd7-6730ba98a51", "LENGTH"),
    ("018e90d8-06e8-7f9f-bfd7-6730ba98a51bb", "LENGTH"),
    ("018e90d806e87f9fbfd76730ba98a51b", "LENGTH"),
    ("018e90d80-6e8-7f9f-bfd7-6730ba98a51b", "HYPHEN"),
    ("018e90d8-06e87-f9f-bfd7-6730ba98a51b", "HYPHEN"),
    ("018e90d8_06e8_7f9f_bfd7_6730ba98a51b", "HYPHEN"),
    ("018e90d8-06e8-7f9f-bfd7-6730ba98a5-b", "HEX_DIGIT"),
    ("g18e90d8-06e8-7f9f-bfd7-6730ba98a51b", "HEX_DIGIT"),
    ("018e90d8-06e8-7f9f-bfd7-6730ba98a51 ", "HEX_DIGIT"),
    ("018e90d8-06e8-7f9f-bfd7-6730ba98a5١b", "HEX_DIGIT"),
])
def test_decode_rejects_malformed(text, code):
    with pytest.raises(DecodeError) as excinfo:
        decode(text)
    assert excinfo.value.code == code
    assert not is_valid(text)


def test_decode_rejects_non_string():
    with pytest.raises(DecodeError) as excinfo:
        decode(KNOWN_RAW)
    assert excinfo.value.code == "TYPE"


def test_decode_error_is_value_error():
    # Callers catching ValueError still see decode failures
    with pytest.raises(ValueError):
        decode("not-a-uuid")


def test_encode_rejects_wrong_length():
    with pytest.raises(ValueError):
        encode(b"\x00" * 15)
    with pytest.raises(ValueError):
        encode(b"\x00" * 17)


def test_is_valid():
    assert is_valid(KNOWN_TEXT)
    assert is_valid(KNOWN_TEXT.upper())
    assert not is_valid(KNOWN_TEXT[:-1])
