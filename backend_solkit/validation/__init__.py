"""
Request validation: the single gate every request passes before any
crypto or instruction code runs.
"""

from backend_solkit.validation.validator import (
    CreateMintParams,
    MintToParams,
    SignParams,
    SolTransferParams,
    TokenTransferParams,
    VerifyParams,
    validate_create_mint,
    validate_mint_to,
    validate_sign,
    validate_token_transfer,
    validate_transfer,
    validate_verify,
)

__all__ = [
    "CreateMintParams",
    "MintToParams",
    "SignParams",
    "SolTransferParams",
    "TokenTransferParams",
    "VerifyParams",
    "validate_create_mint",
    "validate_mint_to",
    "validate_sign",
    "validate_token_transfer",
    "validate_transfer",
    "validate_verify",
]
