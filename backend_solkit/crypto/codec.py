"""Base58 codec for keys, signatures and identifiers (Bitcoin alphabet)."""

from __future__ import annotations

import base58

from backend_solkit.core.exceptions import DecodeError

PUBKEY_LENGTH = 32
SIGNATURE_LENGTH = 64
KEYPAIR_LENGTH = 64


def encode_base58(data: bytes) -> str:
    return base58.b58encode(bytes(data)).decode("ascii")


def decode_base58(text: str) -> bytes:
    """
    Decode base58 text. Empty text decodes to b"".

    Raises DecodeError for characters outside the base58 alphabet, including
    leading or trailing whitespace.
    """
    if text != text.strip():
        raise DecodeError("Invalid base58 string: surrounding whitespace")
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise DecodeError(f"Invalid base58 string: {e}") from e


def decode_fixed(text: str, length: int, what: str = "value") -> bytes:
    """Decode base58 text that must yield exactly `length` bytes."""
    raw = decode_base58(text)
    if len(raw) != length:
        raise DecodeError(f"Invalid {what}: expected {length} bytes, got {len(raw)}")
    return raw
