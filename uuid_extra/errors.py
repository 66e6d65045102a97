"""Exception types raised by the UUID helpers."""

from __future__ import annotations

from uuid import UUID


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class Error(Exception):
    """Base class for every error raised by this package."""

    @classmethod
    def custom(cls, val: object) -> CustomError:
        """Build a free-form error from a message."""
        return CustomError(str(val))

    @classmethod
    def custom_from_err(cls, err: BaseException) -> CustomError:
        """Build a free-form error carrying the text of another exception."""
        return CustomError(str(err))


class CustomError(Error):
    """Free-form error with a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Custom({_quote(self.message)})"


class FailToDecode16U8Error(Error):
    """Decoded data did not hold exactly 16 bytes."""

    def __init__(self, context: str, actual_length: int) -> None:
        super().__init__(context, actual_length)
        self.context = context
        self.actual_length = actual_length

    def __str__(self) -> str:
        return (
            f"FailToDecode16U8 {{ context: {_quote(self.context)}, "
            f"actual_length: {self.actual_length} }}"
        )


class FailExtractTimeNoUuidV7Error(Error):
    """A timestamp was requested from a UUID that is not version 7."""

    def __init__(self, uuid: UUID) -> None:
        super().__init__(uuid)
        self.uuid = uuid

    def __str__(self) -> str:
        return f"FailExtractTimeNoUuidV7({self.uuid})"