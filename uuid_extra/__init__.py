"""UUID v4/v7 generation, v7 timestamp extraction, and Base58/Base64 encodings."""

__version__ = "0.0.2"

__all__ = ["errors", "support", "extra_uuid", "extra_base58", "extra_base64"]