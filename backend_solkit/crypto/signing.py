"""
Message signing and verification (ed25519 via solders).

sign() is deterministic for a given keypair and message. verify() never raises:
any mismatch, including malformed raw signature or key bytes, yields False.
Callers that accept text input parse it first (validation layer) so that a
badly encoded signature is reported as a request error, not as "invalid".
"""

from __future__ import annotations

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from backend_solkit.crypto.codec import PUBKEY_LENGTH, SIGNATURE_LENGTH


def sign(keypair: Keypair, message: bytes) -> Signature:
    return keypair.sign_message(bytes(message))


def verify(signature: Signature | bytes, message: bytes, identifier: Pubkey | bytes) -> bool:
    """Return True iff `signature` is a valid signature of `message` by `identifier`."""
    try:
        sig = signature if isinstance(signature, Signature) else _signature_from_raw(signature)
        pubkey = identifier if isinstance(identifier, Pubkey) else _pubkey_from_raw(identifier)
    except (TypeError, ValueError):
        return False
    return sig.verify(pubkey, bytes(message))


def _signature_from_raw(raw: bytes) -> Signature:
    raw = bytes(raw)
    if len(raw) != SIGNATURE_LENGTH:
        raise ValueError("signature must be 64 bytes")
    return Signature.from_bytes(raw)


def _pubkey_from_raw(raw: bytes) -> Pubkey:
    raw = bytes(raw)
    if len(raw) != PUBKEY_LENGTH:
        raise ValueError("public key must be 32 bytes")
    return Pubkey(raw)
