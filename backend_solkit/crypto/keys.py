"""
Keypair generation and reconstruction (ed25519 via solders).

Key generation draws seeds from a process-wide RandomSource. The default is the
OS CSPRNG (secrets); tests install a DeterministicRandomSource through
set_random_source() to get reproducible keys.

Secret export format: 64 bytes, seed (32) || public key (32).
"""

from __future__ import annotations

import hashlib
import secrets
from typing import Protocol

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from backend_solkit.core.exceptions import InvalidKeyError, KeyGenerationError
from backend_solkit.solkit_logging import get_logger, short_key

logger = get_logger(__name__)

SEED_LENGTH = 32
KEYPAIR_BYTES_LENGTH = 64
MAX_GENERATION_ATTEMPTS = 8

_DEGENERATE_PUBKEY = Pubkey.default()


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """OS CSPRNG; thread safety is that of os.urandom."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class DeterministicRandomSource:
    """
    Reproducible byte stream: sha256(seed || counter) blocks.

    For tests only. Not thread-safe; never install it in a running server.
    """

    def __init__(self, seed: bytes = b"solkit-test") -> None:
        self._seed = bytes(seed)
        self._counter = 0

    def token_bytes(self, n: int) -> bytes:
        out = bytearray()
        while len(out) < n:
            block = hashlib.sha256(self._seed + self._counter.to_bytes(8, "little")).digest()
            self._counter += 1
            out.extend(block)
        return bytes(out[:n])


_random_source: RandomSource = SystemRandomSource()


def get_random_source() -> RandomSource:
    return _random_source


def set_random_source(source: RandomSource | None) -> RandomSource:
    """Install a random source (None restores the system CSPRNG). Returns the previous one."""
    global _random_source
    previous = _random_source
    _random_source = source if source is not None else SystemRandomSource()
    return previous


def generate(source: RandomSource | None = None) -> Keypair:
    """
    Generate a new keypair from a fresh 32-byte seed.

    A degenerate (all-zero) public key is treated as a retry condition; after
    MAX_GENERATION_ATTEMPTS the call fails with KeyGenerationError.
    """
    rng = source or _random_source
    for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
        seed = rng.token_bytes(SEED_LENGTH)
        if len(seed) != SEED_LENGTH:
            raise KeyGenerationError("Random source returned a short seed")
        keypair = Keypair.from_seed(seed)
        if keypair.pubkey() != _DEGENERATE_PUBKEY:
            logger.debug("keypair_generated", pubkey=short_key(keypair.pubkey()), attempt=attempt)
            return keypair
        logger.warning("keypair_degenerate_retry", attempt=attempt)
    raise KeyGenerationError()


def from_secret_bytes(data: bytes) -> Keypair:
    """
    Rebuild a keypair from 64 bytes (seed || pubkey) or 32 bytes (seed only).

    The public key is always re-derived from the seed; a supplied public half
    that does not match raises InvalidKeyError.
    """
    raw = bytes(data)
    if len(raw) not in (SEED_LENGTH, KEYPAIR_BYTES_LENGTH):
        raise InvalidKeyError(
            f"Invalid keypair bytes: expected {SEED_LENGTH} or {KEYPAIR_BYTES_LENGTH} bytes, got {len(raw)}"
        )
    try:
        keypair = Keypair.from_seed(raw[:SEED_LENGTH])
    except (TypeError, ValueError) as e:
        raise InvalidKeyError(f"Invalid keypair bytes: {e}") from e
    if len(raw) == KEYPAIR_BYTES_LENGTH and bytes(keypair.pubkey()) != raw[SEED_LENGTH:]:
        raise InvalidKeyError("Invalid keypair bytes: public key does not match secret")
    return keypair


def keypair_to_secret(keypair: Keypair) -> bytes:
    """Export the 64-byte seed || pubkey form."""
    return bytes(keypair)
