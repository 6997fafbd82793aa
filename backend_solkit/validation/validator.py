"""
Request validation: raw wire fields to typed domain values.

Each operation declares an ordered list of steps. run_steps() applies them one
by one to the raw payload (a mapping keyed by wire field names) and stops at the
first failure, so a request is rejected with exactly one reason and nothing is
computed from a partially valid request. Step order per operation:

    1. required fields present and non-empty (decimals 0 counts as missing)
    2. identifiers decode to 32-byte public keys, in field order
    3. secrets / signatures decode to keypairs / 64-byte signatures
    4. amounts parse as u64 and pass the field's zero rule
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from backend_solkit.core.exceptions import (
    DecodeError,
    InvalidAmount,
    InvalidIdentifier,
    InvalidKeyError,
    InvalidSecretEncoding,
    InvalidSignatureEncoding,
    MissingField,
    ZERO_AMOUNT_MESSAGE,
)
from backend_solkit.crypto.codec import PUBKEY_LENGTH, SIGNATURE_LENGTH, decode_base58, decode_fixed
from backend_solkit.crypto.keys import from_secret_bytes
from backend_solkit.instructions.constants import U64_MAX

# u64 max has 20 digits; longer strings are out of range and never reach int()
_INT_PATTERN = re.compile(r"^-?[0-9]{1,20}\Z")

# A step reads the raw payload and writes parsed values into `out`; it raises on failure.
Step = Callable[[Mapping[str, Any], dict[str, Any]], None]


def run_steps(payload: Mapping[str, Any], steps: list[Step]) -> dict[str, Any]:
    """Apply steps in order; the first raised error ends validation."""
    out: dict[str, Any] = {}
    for step in steps:
        step(payload, out)
    return out


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def required(*names: str, nonzero: tuple[str, ...] = ()) -> Step:
    """All `names` must be present and non-empty; fields in `nonzero` must also not be 0."""

    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        for name in names:
            value = payload.get(name)
            if _is_missing(value):
                raise MissingField(field=name)
            if name in nonzero and _parse_int_or_none(value) == 0:
                raise MissingField(field=name)

    return step


def identifier(name: str, message: str, dest: str | None = None, *, optional: bool = False) -> Step:
    """Parse a base58 field into a 32-byte Pubkey."""

    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        value = payload.get(name)
        if optional and _is_missing(value):
            return
        out[dest or name] = parse_pubkey(value, message, field=name)

    return step


def secret(name: str, dest: str | None = None) -> Step:
    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        out[dest or name] = parse_secret(payload.get(name), field=name)

    return step


def signature(name: str, dest: str | None = None) -> Step:
    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        out[dest or name] = parse_signature(payload.get(name), field=name)

    return step


def amount(name: str, dest: str | None = None, *, allow_zero: bool = False) -> Step:
    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        out[dest or name] = parse_u64(payload.get(name), field=name, allow_zero=allow_zero)

    return step


def integer(name: str, dest: str | None = None) -> Step:
    """Parse an integer field without range checks (range is the builder's concern)."""

    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        parsed = _parse_int_or_none(payload.get(name))
        if parsed is None:
            raise InvalidAmount(f"Invalid {name}", field=name)
        out[dest or name] = parsed

    return step


def text(name: str, dest: str | None = None) -> Step:
    def step(payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        out[dest or name] = str(payload.get(name))

    return step


# -----------------------------------------------------------------------------
# Field parsers
# -----------------------------------------------------------------------------


def parse_pubkey(value: Any, message: str = "Invalid address", *, field: str | None = None) -> Pubkey:
    if not isinstance(value, str) or not value:
        raise InvalidIdentifier(message, field=field)
    try:
        return Pubkey(decode_fixed(value, PUBKEY_LENGTH, "public key"))
    except DecodeError as e:
        raise InvalidIdentifier(message, field=field) from e


def parse_secret(value: Any, *, field: str | None = "secret") -> Keypair:
    """Base58 secret (64-byte keypair or 32-byte seed) to Keypair."""
    if not isinstance(value, str) or not value:
        raise InvalidSecretEncoding(field=field)
    try:
        raw = decode_base58(value)
    except DecodeError as e:
        raise InvalidSecretEncoding(field=field) from e
    try:
        return from_secret_bytes(raw)
    except InvalidKeyError as e:
        raise InvalidSecretEncoding("Invalid keypair bytes", field=field) from e


def parse_signature(value: Any, *, field: str | None = "signature") -> Signature:
    if not isinstance(value, str) or not value:
        raise InvalidSignatureEncoding(field=field)
    try:
        return Signature.from_bytes(decode_fixed(value, SIGNATURE_LENGTH, "signature"))
    except (DecodeError, ValueError) as e:
        raise InvalidSignatureEncoding(field=field) from e


def _parse_int_or_none(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if _INT_PATTERN.match(raw):
            return int(raw)
    return None


def parse_u64(value: Any, *, field: str | None = "amount", allow_zero: bool = False) -> int:
    parsed = _parse_int_or_none(value)
    if parsed is None or not 0 <= parsed <= U64_MAX:
        raise InvalidAmount(field=field)
    if parsed == 0 and not allow_zero:
        raise InvalidAmount(ZERO_AMOUNT_MESSAGE, field=field)
    return parsed


# -----------------------------------------------------------------------------
# Typed request parameters
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CreateMintParams:
    mint: Pubkey
    mint_authority: Pubkey
    decimals: int
    freeze_authority: Pubkey


@dataclass(frozen=True)
class MintToParams:
    mint: Pubkey
    destination: Pubkey
    authority: Pubkey
    amount: int


@dataclass(frozen=True)
class SignParams:
    message: str
    keypair: Keypair


@dataclass(frozen=True)
class VerifyParams:
    message: str
    signature: Signature
    pubkey: Pubkey
    pubkey_text: str


@dataclass(frozen=True)
class SolTransferParams:
    from_pubkey: Pubkey
    to_pubkey: Pubkey
    lamports: int


@dataclass(frozen=True)
class TokenTransferParams:
    owner: Pubkey
    destination: Pubkey
    mint: Pubkey
    amount: int


def validate_create_mint(payload: Mapping[str, Any]) -> CreateMintParams:
    parsed = run_steps(payload, [
        required("mintAuthority", "mint", "decimals", nonzero=("decimals",)),
        identifier("mint", "Invalid mint address"),
        identifier("mintAuthority", "Invalid mint authority address", "mint_authority"),
        identifier("freezeAuthority", "Invalid freeze authority address", "freeze_authority", optional=True),
        integer("decimals"),
    ])
    return CreateMintParams(
        mint=parsed["mint"],
        mint_authority=parsed["mint_authority"],
        decimals=parsed["decimals"],
        freeze_authority=parsed.get("freeze_authority", parsed["mint_authority"]),
    )


def validate_mint_to(payload: Mapping[str, Any]) -> MintToParams:
    parsed = run_steps(payload, [
        required("mint", "destination", "authority", "amount", nonzero=("amount",)),
        identifier("mint", "Invalid mint address"),
        identifier("authority", "Invalid authority address"),
        identifier("destination", "Invalid destination address"),
        amount("amount"),
    ])
    return MintToParams(**parsed)


def validate_sign(payload: Mapping[str, Any]) -> SignParams:
    parsed = run_steps(payload, [
        required("message", "secret"),
        secret("secret", "keypair"),
        text("message"),
    ])
    return SignParams(**parsed)


def validate_verify(payload: Mapping[str, Any]) -> VerifyParams:
    parsed = run_steps(payload, [
        required("message", "signature", "pubkey"),
        identifier("pubkey", "Invalid public key format"),
        signature("signature"),
        text("message"),
        text("pubkey", "pubkey_text"),
    ])
    return VerifyParams(**parsed)


def validate_transfer(payload: Mapping[str, Any]) -> SolTransferParams:
    parsed = run_steps(payload, [
        required("from", "to", "lamports"),
        identifier("from", "Invalid sender address", "from_pubkey"),
        identifier("to", "Invalid recipient address", "to_pubkey"),
        amount("lamports"),
    ])
    return SolTransferParams(**parsed)


def validate_token_transfer(payload: Mapping[str, Any], *, allow_zero: bool = False) -> TokenTransferParams:
    parsed = run_steps(payload, [
        required("owner", "destination", "mint", "amount"),
        identifier("owner", "Invalid sender address"),
        identifier("destination", "Invalid recipient address"),
        identifier("mint", "Invalid mint address"),
        amount("amount", allow_zero=allow_zero),
    ])
    return TokenTransferParams(**parsed)
