"""
Crypto primitives: base58 codec, ed25519 keypairs, message signing.
"""

from backend_solkit.crypto.codec import decode_base58, decode_fixed, encode_base58
from backend_solkit.crypto.keys import from_secret_bytes, generate, keypair_to_secret
from backend_solkit.crypto.signing import sign, verify

__all__ = [
    "decode_base58",
    "decode_fixed",
    "encode_base58",
    "from_secret_bytes",
    "generate",
    "keypair_to_secret",
    "sign",
    "verify",
]
