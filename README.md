# uuid-extra

Small helpers for generating UUIDs (version 4 and version 7) and encoding them
compactly as Base58 or Base64 strings. The package can also decode those strings
back into `uuid.UUID` values.

It uses only the standard library.

## Installation

```
pip install uuid-extra
```

## Generating UUIDs

```python
from uuid_extra.extra_uuid import new_v4, new_v7, now_v7, to_time_epoch_ms

random_id = new_v4()        # uuid.UUID, version 4
ordered_id = new_v7()       # uuid.UUID, version 7 (time ordered)
also_v7 = now_v7()          # new_v7() is an alias of now_v7()

ms = to_time_epoch_ms(ordered_id)   # int, milliseconds since the Unix epoch
```

The package generates version 7 UUIDs itself. It puts a 48-bit millisecond
timestamp in the top bits and fills the remaining bits from a random counter.
The generator is thread-safe. When several UUIDs are made within the same
millisecond, the counter is incremented, so UUIDs generated one after another
in a process compare in increasing order.

`to_time_epoch_ms` raises `FailExtractTimeNoUuidV7Error` when it is given a
UUID that is not version 7.

## Base58

```python
from uuid_extra.extra_base58 import new_v4_b58, new_v7_b58, from_b58

text = new_v7_b58()     # Base58 string, at most 22 characters
uid = from_b58(text)    # back to uuid.UUID
```

The encoding uses the Bitcoin alphabet, so its strings never contain `0`, `O`,
`I` or `l`. Each leading zero byte is written as `1`.

The lower-level functions `b58encode(data)` and `b58decode(s)` work on
arbitrary bytes. `b58decode` raises `ValueError` for a character that is not in
the alphabet.

## Base64

```python
from uuid_extra.extra_base64 import (
    new_v4_b64, new_v4_b64url, new_v4_b64url_nopad,
    new_v7_b64, new_v7_b64url, new_v7_b64url_nopad,
    from_b64, from_b64url, from_b64url_nopad,
)

std = new_v7_b64()              # 24 chars, standard alphabet, padded with "=="
url = new_v7_b64url()           # 24 chars, URL-safe alphabet, padded
short = new_v7_b64url_nopad()   # 22 chars, URL-safe alphabet, no padding

assert from_b64url_nopad(short).version == 7
```

Decoding is strict, and each `from_*` function applies its own rules:

- `from_b64` accepts only the standard alphabet (`+`, `/`) and requires padding.
- `from_b64url` accepts only the URL-safe alphabet (`-`, `_`) and requires
  padding.
- `from_b64url_nopad` accepts only the URL-safe alphabet and rejects any `=`.

All three also reject trailing bits that are not canonical.

## Errors

All failures from the `from_*` functions and from `to_time_epoch_ms` raise
subclasses of `uuid_extra.errors.Error`:

- `CustomError`: the text could not be decoded, for example because of an
  invalid character or bad padding. Its `message` attribute holds the
  decoder's text, and `str()` renders it as `Custom("...")`.
- `FailToDecode16U8Error`: the text decoded, but not to exactly 16 bytes. It
  carries `context` (one of `"base58"`, `"base64"`, `"base64url"` or
  `"base64url-nopad"`) and `actual_length`.
- `FailExtractTimeNoUuidV7Error`: a timestamp was requested from a UUID that is
  not version 7. It carries the offending `uuid`.

`Error.custom(val)` and `Error.custom_from_err(err)` build a `CustomError`
from a message or from another exception.

The lower-level helper `uuid_extra.support.from_bytes(decoded_bytes,
error_context)` turns exactly 16 bytes into a UUID. It raises
`FailToDecode16U8Error` with the given context for any other length.

```python
from uuid_extra.errors import FailToDecode16U8Error
from uuid_extra.extra_base58 import b58encode, from_b58

try:
    from_b58(b58encode(b"short"))
except FailToDecode16U8Error as err:
    print(err.context, err.actual_length)   # base58 5
```

## What it does not do

This is a library only. It has no command-line tool, and it does not parse or
format the usual hyphenated UUID text form; `uuid.UUID` from the standard
library already does that.