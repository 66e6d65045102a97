"""Shared helpers for turning decoded bytes into UUIDs."""

from __future__ import annotations

from uuid import UUID

from uuid_extra.errors import FailToDecode16U8Error

_UUID_LEN = 16


def from_bytes(decoded_bytes: bytes | bytearray, error_context: str) -> UUID:
    """Build a UUID from exactly 16 bytes, raising with *error_context* otherwise."""
    if len(decoded_bytes) != _UUID_LEN:
        raise FailToDecode16U8Error(error_context, len(decoded_bytes))
    return UUID(bytes=bytes(decoded_bytes))