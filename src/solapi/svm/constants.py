"""SVM constants - program ids, key sizes and instruction opcodes."""

from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.sysvar import RENT as RENT_SYSVAR_ID
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

# Key and signature sizes (bytes)
PUBKEY_LENGTH = 32
SEED_LENGTH = 32
SECRET_KEY_LENGTH = 64
SIGNATURE_LENGTH = 64

# Program-derived address limits
MAX_SEED_LENGTH = 32
MAX_SEEDS = 16

# Largest value an unsigned 64-bit amount can hold
U64_MAX = 2**64 - 1
U8_MAX = 255

# System program instruction index (u32 little-endian)
SYSTEM_TRANSFER_OPCODE = 2

# SPL token instruction indices (u8)
TOKEN_INITIALIZE_MINT_OPCODE = 0
TOKEN_TRANSFER_OPCODE = 3
TOKEN_MINT_TO_OPCODE = 7

__all__ = [
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "MAX_SEEDS",
    "MAX_SEED_LENGTH",
    "PUBKEY_LENGTH",
    "RENT_SYSVAR_ID",
    "SECRET_KEY_LENGTH",
    "SEED_LENGTH",
    "SIGNATURE_LENGTH",
    "SYSTEM_PROGRAM_ID",
    "SYSTEM_TRANSFER_OPCODE",
    "TOKEN_INITIALIZE_MINT_OPCODE",
    "TOKEN_MINT_TO_OPCODE",
    "TOKEN_PROGRAM_ID",
    "TOKEN_TRANSFER_OPCODE",
    "U64_MAX",
    "U8_MAX",
]
