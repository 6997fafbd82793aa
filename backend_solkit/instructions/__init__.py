"""
Instruction builders: pure functions from typed values to unsigned
System / SPL Token instructions.
"""

from backend_solkit.instructions.builder import (
    InstructionDescriptor,
    build_initialize_mint,
    build_mint_to,
    build_token_transfer,
    build_transfer,
)

__all__ = [
    "InstructionDescriptor",
    "build_initialize_mint",
    "build_mint_to",
    "build_token_transfer",
    "build_transfer",
]
