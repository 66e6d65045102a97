import uuid

import pytest

from uuid_extra.errors import CustomError, FailToDecode16U8Error
from uuid_extra.extra_base58 import (
    b58decode,
    b58encode,
    from_b58,
    new_v4_b58,
    new_v7_b58,
)
from uuid_extra.extra_uuid import new_v7

FORBIDDEN = "+/=0OIl"

VECTORS = [
    ("", ""),
    ("61", "2g"),
    ("626262", "a3gV"),
    ("636363", "aPEr"),
    ("73696d706c792061206c6f6e6720737472696e67", "2cFupjhnEsSn59qHXstmK2ffpLv2"),
    ("00eb15231dfceb60925886b67d065299925915aeb172c06647", "1NS17iag9jJgTHD1VXjvLCEnZuQ3rJDE9L"),
    ("516b6fcd0f", "ABnLTmg"),
    ("bf4f89001e670274dd", "3SEo3LWLoPntC"),
    ("572e4794", "3EFU7m"),
    ("ecac89cad93923c02321", "EJDM8drfXA6uyA"),
    ("10c8511e", "Rt5zm"),
    ("00000000000000000000", "1111111111"),
]


@pytest.mark.parametrize("hex_data,encoded", VECTORS)
def test_b58encode_vectors(hex_data, encoded):
    assert b58encode(bytes.fromhex(hex_data)) == encoded


@pytest.mark.parametrize("hex_data,encoded", VECTORS)
def test_b58decode_vectors(hex_data, encoded):
    assert b58decode(encoded) == bytes.fromhex(hex_data)


def test_new_v4_b58_simple():
    encoded = new_v4_b58()
    for char in FORBIDDEN:
        assert char not in encoded
    decoded = b58decode(encoded)
    assert len(decoded) == 16
    assert uuid.UUID(bytes=decoded).version == 4


def test_new_v7_b58_simple():
    encoded = new_v7_b58()
    for char in FORBIDDEN:
        assert char not in encoded
    decoded = b58decode(encoded)
    assert len(decoded) == 16
    assert uuid.UUID(bytes=decoded).version == 7


def test_from_b58_ok():
    original = new_v7()
    encoded = b58encode(original.bytes)
    assert from_b58(encoded) == original


def test_from_b58_round_trip_leading_zeros():
    original = uuid.UUID(bytes=b"\x00\x00" + bytes(range(1, 15)))
    encoded = b58encode(original.bytes)
    assert encoded.startswith("11")
    assert from_b58(encoded) == original


def test_from_b58_err_invalid_char():
    with pytest.raises(CustomError) as info:
        from_b58("ThisIsInvalid0")
    assert "provided string contained invalid character" in str(info.value)


def test_from_b58_err_wrong_len():
    short = b58encode(b"short")
    with pytest.raises(FailToDecode16U8Error) as info:
        from_b58(short)
    assert info.value.context == "base58"
    assert info.value.actual_length == 5