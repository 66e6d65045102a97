from uuid import UUID

import pytest

from uuid_extra.errors import (
    CustomError,
    Error,
    FailExtractTimeNoUuidV7Error,
    FailToDecode16U8Error,
)


def test_custom_builds_custom_error_with_message():
    err = Error.custom("boom")
    assert isinstance(err, CustomError)
    assert err.message == "boom"
    assert "boom" in str(err)


def test_custom_from_err_uses_exception_text():
    err = Error.custom_from_err(ValueError("bad input"))
    assert isinstance(err, CustomError)
    assert err.message == "bad input"


def test_custom_from_subclass_still_custom():
    err = FailToDecode16U8Error.custom("x")
    assert type(err) is CustomError
    assert err.message == "x"


def test_custom_str_starts_with_variant_name():
    assert str(Error.custom("msg")).startswith("Custom(")


def test_fail_to_decode_str_carries_context_and_length():
    err = FailToDecode16U8Error("base64url", 5)
    text = str(err)
    assert 'FailToDecode16U8 { context: "base64url"' in text
    assert "5" in text
    assert err.context == "base64url"
    assert err.actual_length == 5


def test_fail_extract_time_keeps_uuid():
    value = UUID(int=42)
    err = FailExtractTimeNoUuidV7Error(value)
    assert err.uuid == value
    assert str(value) in str(err)
    assert str(err).startswith("FailExtractTimeNoUuidV7")


def test_errors_are_raisable_and_caught_as_base():
    err = FailToDecode16U8Error("base58", 3)
    with pytest.raises(Error) as info:
        raise err
    assert info.value is err
    assert info.value.context == "base58"
    assert info.value.actual_length == 3
    assert 'context: "base58"' in str(info.value)