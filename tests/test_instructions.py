"""
Instruction builders: program ids, account order and flags, byte-exact data.
"""

from __future__ import annotations

import struct

import pytest
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from backend_solkit.core.exceptions import InstructionError, InvalidAmount, MissingField
from backend_solkit.instructions import (
    InstructionDescriptor,
    build_initialize_mint,
    build_mint_to,
    build_token_transfer,
    build_transfer,
)
from backend_solkit.instructions.constants import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID, U64_MAX


def _key(n: int) -> Pubkey:
    return Keypair.from_seed(bytes([n] * 32)).pubkey()


MINT = _key(1)
AUTHORITY = _key(2)
DEST = _key(3)
OWNER = _key(4)
FREEZE = _key(5)


def _flags(ix: InstructionDescriptor) -> list[tuple[Pubkey, bool, bool]]:
    return [(m.pubkey, m.is_signer, m.is_writable) for m in ix.accounts]


def test_program_ids():
    assert str(SYSTEM_PROGRAM_ID) == "11111111111111111111111111111111"
    assert str(TOKEN_PROGRAM_ID) == "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


# --- InitializeMint2 ---


def test_initialize_mint_layout():
    ix = build_initialize_mint(MINT, AUTHORITY, 9)
    assert ix.program_id == TOKEN_PROGRAM_ID
    assert _flags(ix) == [(MINT, False, True)]
    assert ix.data == bytes([20, 9]) + bytes(AUTHORITY) + b"\x01" + bytes(AUTHORITY)
    assert len(ix.data) == 67


def test_initialize_mint_explicit_freeze_authority():
    ix = build_initialize_mint(MINT, AUTHORITY, 6, freeze_authority=FREEZE)
    assert ix.data[34] == 1
    assert ix.data[35:] == bytes(FREEZE)


def test_initialize_mint_without_freeze_authority():
    ix = build_initialize_mint(MINT, AUTHORITY, 6, freeze_authority=None)
    assert ix.data == bytes([20, 6]) + bytes(AUTHORITY) + b"\x00"


def test_initialize_mint_rejects_zero_decimals():
    with pytest.raises(MissingField):
        build_initialize_mint(MINT, AUTHORITY, 0)


@pytest.mark.parametrize("decimals", [256, 1000, -1])
def test_initialize_mint_rejects_unencodable_decimals(decimals):
    with pytest.raises(InstructionError, match="decimals"):
        build_initialize_mint(MINT, AUTHORITY, decimals)


def test_initialize_mint_max_decimals():
    assert build_initialize_mint(MINT, AUTHORITY, 255).data[1] == 255


# --- MintTo ---


def test_mint_to_layout():
    ix = build_mint_to(MINT, DEST, AUTHORITY, 1_000_000)
    assert ix.program_id == TOKEN_PROGRAM_ID
    assert _flags(ix) == [(MINT, False, True), (DEST, False, True), (AUTHORITY, True, False)]
    assert ix.data == b"\x07" + struct.pack("<Q", 1_000_000)


def test_mint_to_rejects_zero():
    with pytest.raises(InvalidAmount):
        build_mint_to(MINT, DEST, AUTHORITY, 0)


def test_mint_to_rejects_overflow():
    with pytest.raises(InstructionError):
        build_mint_to(MINT, DEST, AUTHORITY, U64_MAX + 1)


# --- System transfer ---


def test_transfer_rejects_zero():
    with pytest.raises(InvalidAmount, match="greater than 0"):
        build_transfer(OWNER, DEST, 0)


def test_transfer_one_lamport():
    ix = build_transfer(OWNER, DEST, 1)
    assert ix.program_id == SYSTEM_PROGRAM_ID
    assert len(ix.accounts) == 2
    assert _flags(ix) == [(OWNER, True, True), (DEST, False, True)]
    assert ix.data == struct.pack("<IQ", 2, 1)


def test_transfer_max_amount():
    ix = build_transfer(OWNER, DEST, U64_MAX)
    assert ix.data[4:] == b"\xff" * 8


def test_transfer_rejects_overflow():
    with pytest.raises(InstructionError):
        build_transfer(OWNER, DEST, U64_MAX + 1)


# --- Token transfer ---


def test_token_transfer_layout():
    ix = build_token_transfer(OWNER, DEST, MINT, 42)
    assert ix.program_id == TOKEN_PROGRAM_ID
    assert _flags(ix) == [(OWNER, False, True), (DEST, False, True), (OWNER, True, False)]
    assert ix.data == b"\x03" + struct.pack("<Q", 42)


def test_token_transfer_zero_rule():
    with pytest.raises(InvalidAmount):
        build_token_transfer(OWNER, DEST, MINT, 0)
    ix = build_token_transfer(OWNER, DEST, MINT, 0, allow_zero=True)
    assert ix.data == b"\x03" + bytes(8)


# --- Descriptor ---


def test_descriptor_is_immutable_and_converts():
    ix = build_mint_to(MINT, DEST, AUTHORITY, 5)
    with pytest.raises(AttributeError):
        ix.data = b""  # type: ignore[misc]
    solders_ix = ix.to_instruction()
    assert isinstance(solders_ix, Instruction)
    assert InstructionDescriptor.from_instruction(solders_ix) == ix
