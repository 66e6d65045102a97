"""Base58 (Bitcoin alphabet) encoding of UUIDs."""

from __future__ import annotations

from uuid import UUID

from uuid_extra.errors import Error
from uuid_extra.extra_uuid import new_v4, new_v7
from uuid_extra.support import from_bytes

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_BASE = len(_ALPHABET)
_ZERO_CHAR = _ALPHABET[0]


def b58encode(data: bytes | bytearray) -> str:
    """Encode bytes with the Bitcoin Base58 alphabet."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    leading_zeros = len(data) - len(stripped)

    number = int.from_bytes(stripped, "big")
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, _BASE)
        digits.append(_ALPHABET[remainder])

    return _ZERO_CHAR * leading_zeros + "".join(reversed(digits))


def b58decode(s: str) -> bytes:
    """Decode a Bitcoin Base58 string into bytes.

    Raises ``ValueError`` when the string holds a character outside the alphabet.
    """
    raw = s.encode("utf-8")
    number = 0
    for offset, byte in enumerate(raw):
        if byte > 127:
            raise ValueError(
                f"provided string contained non-ascii character starting at byte {offset}"
            )
        char = chr(byte)
        value = _INDEX.get(char)
        if value is None:
            raise ValueError(
                f"provided string contained invalid character {char!r} at byte {offset}"
            )
        number = number * _BASE + value

    leading_zeros = len(s) - len(s.lstrip(_ZERO_CHAR))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_zeros + body


def new_v4_b58() -> str:
    """Generate a new version 4 UUID encoded with Base58."""
    return b58encode(new_v4().bytes)


def new_v7_b58() -> str:
    """Generate a new version 7 UUID encoded with Base58."""
    return b58encode(new_v7().bytes)


def from_b58(s: str) -> UUID:
    """Decode a Base58 string into a UUID."""
    try:
        decoded = b58decode(s)
    except ValueError as err:
        raise Error.custom_from_err(err) from err
    return from_bytes(decoded, "base58")