"""
FastAPI router: keypair, token, message and transfer endpoints.

Handlers are thin: the request model is dumped back to wire field names, the
validation layer turns it into typed params, a crypto/instruction function does
the work and the result is wrapped in the {success, data} envelope. Any
SolkitError raised along the way is turned into a 400 envelope by the app's
exception handler.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, StrictInt

from backend_solkit.config import Settings, get_settings
from backend_solkit.crypto import codec, keys, signing
from backend_solkit.instructions import (
    InstructionDescriptor,
    build_initialize_mint,
    build_mint_to,
    build_token_transfer,
    build_transfer,
)
from backend_solkit.solkit_logging import get_logger, short_key
from backend_solkit.validation import (
    validate_create_mint,
    validate_mint_to,
    validate_sign,
    validate_token_transfer,
    validate_transfer,
    validate_verify,
)

logger = get_logger(__name__)

router = APIRouter()


# -----------------------------------------------------------------------------
# Request models (all fields optional; the validation layer decides what is missing)
# -----------------------------------------------------------------------------


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class CreateTokenRequest(_WireModel):
    """POST /token/create body."""

    mint_authority: str | None = Field(None, alias="mintAuthority", description="Mint authority (base58)")
    mint: str | None = Field(None, description="Mint account (base58)")
    decimals: StrictInt | str | None = Field(None, description="Token decimals (1-255)")
    freeze_authority: str | None = Field(
        None, alias="freezeAuthority", description="Freeze authority (base58); defaults to mint authority"
    )


class MintTokenRequest(_WireModel):
    """POST /token/mint body."""

    mint: str | None = None
    destination: str | None = None
    authority: str | None = None
    amount: StrictInt | str | None = None


class SignMessageRequest(_WireModel):
    """POST /message/sign body."""

    message: str | None = None
    secret: str | None = Field(None, description="Base58 secret key (64-byte keypair)")


class VerifyMessageRequest(_WireModel):
    """POST /message/verify body."""

    message: str | None = None
    signature: str | None = Field(None, description="Base58 signature (64 bytes)")
    pubkey: str | None = Field(None, description="Base58 public key")


class SendSolRequest(_WireModel):
    """POST /send/sol body."""

    from_: str | None = Field(None, alias="from", description="Sender (base58)")
    to: str | None = Field(None, description="Recipient (base58)")
    lamports: StrictInt | str | None = None


class SendTokenRequest(_WireModel):
    """POST /send/token body."""

    owner: str | None = None
    destination: str | None = None
    mint: str | None = None
    amount: StrictInt | str | None = None


# -----------------------------------------------------------------------------
# Response data models
# -----------------------------------------------------------------------------


class KeypairData(BaseModel):
    pubkey: str = Field(..., description="Public key (base58)")
    secret: str = Field(..., description="64-byte secret key (base58)")


class AccountMetaData(BaseModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class TokenInstructionData(BaseModel):
    program_id: str
    accounts: list[AccountMetaData]
    instruction_data: list[int] = Field(..., description="Raw instruction bytes")


class SignData(BaseModel):
    signature: str
    public_key: str
    message: str


class VerifyData(BaseModel):
    valid: bool
    message: str
    pubkey: str


class SolTransferData(BaseModel):
    program_id: str
    accounts: list[str]
    instruction_data: str = Field(..., description="Instruction bytes (base58)")


class TokenAccountData(BaseModel):
    pubkey: str
    is_signer: bool


class TokenTransferData(BaseModel):
    program_id: str
    accounts: list[TokenAccountData]
    instruction_data: str = Field(..., description="Instruction bytes (base58)")


def _ok(data: BaseModel) -> dict[str, Any]:
    return {"success": True, "data": data.model_dump()}


def _token_instruction_data(ix: InstructionDescriptor) -> TokenInstructionData:
    return TokenInstructionData(
        program_id=str(ix.program_id),
        accounts=[
            AccountMetaData(pubkey=str(meta.pubkey), is_signer=meta.is_signer, is_writable=meta.is_writable)
            for meta in ix.accounts
        ],
        instruction_data=list(ix.data),
    )


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


@router.post("/keypair")
def generate_keypair() -> dict[str, Any]:
    """Generate a new ed25519 keypair; secret is the 64-byte seed||pubkey in base58."""
    keypair = keys.generate()
    pubkey = str(keypair.pubkey())
    logger.info("keypair_generated", pubkey=short_key(pubkey))
    return _ok(KeypairData(pubkey=pubkey, secret=codec.encode_base58(keys.keypair_to_secret(keypair))))


@router.post("/token/create")
def create_token(body: CreateTokenRequest) -> dict[str, Any]:
    """Build an SPL Token InitializeMint2 instruction."""
    params = validate_create_mint(body.wire())
    ix = build_initialize_mint(
        params.mint,
        params.mint_authority,
        params.decimals,
        freeze_authority=params.freeze_authority,
    )
    logger.info("token_create_built", mint=short_key(params.mint), decimals=params.decimals)
    return _ok(_token_instruction_data(ix))


@router.post("/token/mint")
def mint_token(body: MintTokenRequest) -> dict[str, Any]:
    """Build an SPL Token MintTo instruction."""
    params = validate_mint_to(body.wire())
    ix = build_mint_to(params.mint, params.destination, params.authority, params.amount)
    logger.info("token_mint_built", mint=short_key(params.mint), amount=params.amount)
    return _ok(_token_instruction_data(ix))


@router.post("/message/sign")
def sign_message(body: SignMessageRequest) -> dict[str, Any]:
    """Sign a UTF-8 message with the supplied secret key."""
    params = validate_sign(body.wire())
    signature = signing.sign(params.keypair, params.message.encode("utf-8"))
    pubkey = str(params.keypair.pubkey())
    logger.info("message_signed", pubkey=short_key(pubkey), message_len=len(params.message))
    return _ok(SignData(signature=str(signature), public_key=pubkey, message=params.message))


@router.post("/message/verify")
def verify_message(body: VerifyMessageRequest) -> dict[str, Any]:
    """Verify a base58 signature over a UTF-8 message for a public key."""
    params = validate_verify(body.wire())
    valid = signing.verify(params.signature, params.message.encode("utf-8"), params.pubkey)
    logger.info("message_verified", pubkey=short_key(params.pubkey), valid=valid)
    return _ok(VerifyData(valid=valid, message=params.message, pubkey=params.pubkey_text))


@router.post("/send/sol")
def send_sol(body: SendSolRequest) -> dict[str, Any]:
    """Build a System program transfer instruction."""
    params = validate_transfer(body.wire())
    ix = build_transfer(params.from_pubkey, params.to_pubkey, params.lamports)
    logger.info("send_sol_built", from_key=short_key(params.from_pubkey), lamports=params.lamports)
    return _ok(
        SolTransferData(
            program_id=str(ix.program_id),
            accounts=[str(meta.pubkey) for meta in ix.accounts],
            instruction_data=codec.encode_base58(ix.data),
        )
    )


@router.post("/send/token")
def send_token(body: SendTokenRequest, settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Build an SPL Token transfer instruction from the owner's token account."""
    params = validate_token_transfer(body.wire(), allow_zero=settings.allow_zero_token_transfer)
    ix = build_token_transfer(
        params.owner,
        params.destination,
        params.mint,
        params.amount,
        allow_zero=settings.allow_zero_token_transfer,
    )
    logger.info("send_token_built", owner=short_key(params.owner), amount=params.amount)
    return _ok(
        TokenTransferData(
            program_id=str(ix.program_id),
            accounts=[TokenAccountData(pubkey=str(meta.pubkey), is_signer=meta.is_signer) for meta in ix.accounts],
            instruction_data=codec.encode_base58(ix.data),
        )
    )
