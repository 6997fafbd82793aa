"""
Unsigned instruction builders for the System and SPL Token programs.

Each builder takes typed values (Pubkey, int) and returns an immutable
InstructionDescriptor: program id, ordered account metas, raw data. No I/O,
no network, no signing. Layouts:

    InitializeMint2  u8 20 | u8 decimals | [32] mint_authority | COption<[32]> freeze_authority
    MintTo           u8 7  | u64 amount
    Transfer (token) u8 3  | u64 amount
    Transfer (system) u32 2 | u64 lamports

All integers little-endian. Account order is fixed per instruction.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer

from backend_solkit.core.exceptions import (
    ZERO_AMOUNT_MESSAGE,
    InstructionError,
    InvalidAmount,
    MissingField,
)
from backend_solkit.instructions.constants import (
    COPTION_NONE,
    COPTION_SOME,
    TOKEN_IX_INITIALIZE_MINT2,
    TOKEN_IX_MINT_TO,
    TOKEN_IX_TRANSFER,
    TOKEN_PROGRAM_ID,
    U8_MAX,
    U64_MAX,
)
from backend_solkit.solkit_logging import get_logger, short_key

logger = get_logger(__name__)

_UNSET = object()

_MINT2_HEAD = struct.Struct("<BB32s")
_AMOUNT_IX = struct.Struct("<BQ")


@dataclass(frozen=True)
class InstructionDescriptor:
    """Immutable instruction value: target program, ordered accounts, payload."""

    program_id: Pubkey
    accounts: tuple[AccountMeta, ...]
    data: bytes

    @classmethod
    def from_instruction(cls, ix: Instruction) -> InstructionDescriptor:
        return cls(program_id=ix.program_id, accounts=tuple(ix.accounts), data=bytes(ix.data))

    def to_instruction(self) -> Instruction:
        return Instruction(program_id=self.program_id, data=self.data, accounts=list(self.accounts))


def _check_u64(amount: int, what: str = "amount") -> None:
    if not 0 <= amount <= U64_MAX:
        raise InstructionError(f"{what} must fit in an unsigned 64-bit integer, got {amount}")


def build_initialize_mint(
    mint: Pubkey,
    mint_authority: Pubkey,
    decimals: int,
    freeze_authority: Pubkey | None | object = _UNSET,
) -> InstructionDescriptor:
    """
    SPL Token InitializeMint2. Accounts: [mint (writable)].

    freeze_authority defaults to mint_authority; pass None for a mint without
    a freeze authority. decimals 0 is rejected as a missing required field;
    values outside 0..255 cannot be encoded and raise InstructionError.
    """
    if decimals == 0:
        raise MissingField(field="decimals")
    if not 0 <= decimals <= U8_MAX:
        raise InstructionError(f"decimals must be between 1 and {U8_MAX}, got {decimals}")
    if freeze_authority is _UNSET:
        freeze_authority = mint_authority

    data = bytearray(_MINT2_HEAD.pack(TOKEN_IX_INITIALIZE_MINT2, decimals, bytes(mint_authority)))
    if freeze_authority is None:
        data.append(COPTION_NONE)
    else:
        data.append(COPTION_SOME)
        data.extend(bytes(freeze_authority))

    accounts = (AccountMeta(pubkey=mint, is_signer=False, is_writable=True),)
    logger.debug("initialize_mint_built", mint=short_key(mint), decimals=decimals)
    return InstructionDescriptor(program_id=TOKEN_PROGRAM_ID, accounts=accounts, data=bytes(data))


def build_mint_to(
    mint: Pubkey,
    destination: Pubkey,
    authority: Pubkey,
    amount: int,
) -> InstructionDescriptor:
    """SPL Token MintTo. Accounts: [mint (w), destination (w), authority (signer)]."""
    if amount == 0:
        raise InvalidAmount(ZERO_AMOUNT_MESSAGE, field="amount")
    _check_u64(amount)
    accounts = (
        AccountMeta(pubkey=mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=destination, is_signer=False, is_writable=True),
        AccountMeta(pubkey=authority, is_signer=True, is_writable=False),
    )
    data = _AMOUNT_IX.pack(TOKEN_IX_MINT_TO, amount)
    logger.debug("mint_to_built", mint=short_key(mint), amount=amount)
    return InstructionDescriptor(program_id=TOKEN_PROGRAM_ID, accounts=accounts, data=data)


def build_transfer(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> InstructionDescriptor:
    """System program Transfer. Accounts: [from (signer, w), to (w)]."""
    if lamports == 0:
        raise InvalidAmount(ZERO_AMOUNT_MESSAGE, field="lamports")
    _check_u64(lamports, "lamports")
    ix = transfer(TransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports))
    logger.debug("transfer_built", from_key=short_key(from_pubkey), lamports=lamports)
    return InstructionDescriptor.from_instruction(ix)


def build_token_transfer(
    owner: Pubkey,
    destination: Pubkey,
    mint: Pubkey,
    amount: int,
    *,
    allow_zero: bool = False,
) -> InstructionDescriptor:
    """
    SPL Token Transfer from the owner's account.

    Accounts: [source = owner (w), destination (w), owner (signer)]. The mint is
    checked by the caller but not part of the plain Transfer layout.
    """
    if amount == 0 and not allow_zero:
        raise InvalidAmount(ZERO_AMOUNT_MESSAGE, field="amount")
    _check_u64(amount)
    accounts = (
        AccountMeta(pubkey=owner, is_signer=False, is_writable=True),
        AccountMeta(pubkey=destination, is_signer=False, is_writable=True),
        AccountMeta(pubkey=owner, is_signer=True, is_writable=False),
    )
    data = _AMOUNT_IX.pack(TOKEN_IX_TRANSFER, amount)
    logger.debug("token_transfer_built", owner=short_key(owner), mint=short_key(mint), amount=amount)
    return InstructionDescriptor(program_id=TOKEN_PROGRAM_ID, accounts=accounts, data=data)
