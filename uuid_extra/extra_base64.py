"""Base64 encodings (standard, URL-safe, URL-safe unpadded) of UUIDs."""

from __future__ import annotations

import base64
import string
from uuid import UUID

from uuid_extra.errors import Error
from uuid_extra.extra_uuid import new_v4, new_v7
from uuid_extra.support import from_bytes

_STANDARD_ALPHABET = (string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/").encode()
_URL_SAFE_ALPHABET = (string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_").encode()
_PAD = ord("=")


class _DecodeError(ValueError):
    """Base64 input rejected by the strict decoder."""


def _strict_decode(s: str, alphabet: bytes, padded: bool) -> bytes:
    raw = s.encode("utf-8")
    pad_start = raw.find(b"=")
    body = raw if pad_start < 0 else raw[:pad_start]
    padding = b"" if pad_start < 0 else raw[pad_start:]
    values = {byte: index for index, byte in enumerate(alphabet)}

    for offset, byte in enumerate(body):
        if byte not in values:
            raise _DecodeError(f"Invalid symbol {byte}, offset {offset}.")
    for offset, byte in enumerate(padding, start=len(body)):
        if byte != _PAD:
            raise _DecodeError(f"Invalid symbol {byte}, offset {offset}.")

    remainder = len(body) % 4
    if remainder == 1:
        raise _DecodeError(f"Invalid input length: {len(body)}")

    expected_pad = (4 - remainder) % 4 if padded else 0
    if len(padding) != expected_pad:
        raise _DecodeError("Invalid padding")

    unused_bits = {0: 0, 2: 4, 3: 2}[remainder]
    if unused_bits:
        last = body[-1]
        if values[last] & ((1 << unused_bits) - 1):
            raise _DecodeError(f"Invalid last symbol {last}, offset {len(body) - 1}.")

    canonical = body.translate(bytes.maketrans(alphabet, _STANDARD_ALPHABET))
    canonical += b"=" * ((4 - remainder) % 4)
    return base64.b64decode(canonical, validate=True)


def _decode_uuid(s: str, alphabet: bytes, padded: bool, context: str) -> UUID:
    try:
        decoded = _strict_decode(s, alphabet, padded)
    except _DecodeError as err:
        raise Error.custom_from_err(err) from err
    return from_bytes(decoded, context)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii")


def _b64url_nopad(data: bytes) -> str:
    return _b64url(data).rstrip("=")


def new_v4_b64() -> str:
    """Generate a new version 4 UUID encoded with standard Base64."""
    return _b64(new_v4().bytes)


def new_v4_b64url() -> str:
    """Generate a new version 4 UUID encoded with URL-safe Base64."""
    return _b64url(new_v4().bytes)


def new_v4_b64url_nopad() -> str:
    """Generate a new version 4 UUID encoded with URL-safe Base64 without padding."""
    return _b64url_nopad(new_v4().bytes)


def new_v7_b64() -> str:
    """Generate a new version 7 UUID encoded with standard Base64."""
    return _b64(new_v7().bytes)


def new_v7_b64url() -> str:
    """Generate a new version 7 UUID encoded with URL-safe Base64."""
    return _b64url(new_v7().bytes)


def new_v7_b64url_nopad() -> str:
    """Generate a new version 7 UUID encoded with URL-safe Base64 without padding."""
    return _b64url_nopad(new_v7().bytes)


def from_b64(s: str) -> UUID:
    """Decode a standard, padded Base64 string into a UUID."""
    return _decode_uuid(s, _STANDARD_ALPHABET, True, "base64")


def from_b64url(s: str) -> UUID:
    """Decode a URL-safe, padded Base64 string into a UUID."""
    return _decode_uuid(s, _URL_SAFE_ALPHABET, True, "base64url")


def from_b64url_nopad(s: str) -> UUID:
    """Decode a URL-safe Base64 string without padding into a UUID."""
    return _decode_uuid(s, _URL_SAFE_ALPHABET, False, "base64url-nopad")