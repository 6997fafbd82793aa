"""
Program ids and instruction discriminants.

SPL Token instructions are tagged by a single leading byte; the System program
uses a little-endian u32 tag (bincode enum index).
"""

from typing import Final

from solders.pubkey import Pubkey

SYSTEM_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string("11111111111111111111111111111111")
TOKEN_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")

# SPL Token (TokenInstruction enum index)
TOKEN_IX_TRANSFER: Final[int] = 3
TOKEN_IX_MINT_TO: Final[int] = 7
TOKEN_IX_INITIALIZE_MINT2: Final[int] = 20

# System program (SystemInstruction enum index)
SYSTEM_IX_TRANSFER: Final[int] = 2

# COption<Pubkey> tags in SPL Token instruction data
COPTION_NONE: Final[int] = 0
COPTION_SOME: Final[int] = 1

U8_MAX: Final[int] = 0xFF
U64_MAX: Final[int] = 0xFFFF_FFFF_FFFF_FFFF
