"""Solana Virtual Machine (SVM) key, address and instruction support."""

from solapi.svm.address import (
    derive_associated_address,
    find_program_address,
)
from solapi.svm.instructions import (
    build_initialize_mint,
    build_mint_to,
    build_sol_transfer,
    build_token_transfer,
)
from solapi.svm.signing import parse_signature, sign, verify
from solapi.svm.wallet import (
    Keypair,
    generate_keypair,
    keypair_from_base58,
    load_keypair,
    parse_pubkey,
)

__all__ = [
    "Keypair",
    "generate_keypair",
    "load_keypair",
    "keypair_from_base58",
    "parse_pubkey",
    "sign",
    "verify",
    "parse_signature",
    "find_program_address",
    "derive_associated_address",
    "build_sol_transfer",
    "build_token_transfer",
    "build_initialize_mint",
    "build_mint_to",
]
