"""Instruction builders for SOL and SPL token operations."""

from __future__ import annotations

import struct

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams as SystemTransferParams
from solders.system_program import transfer as system_transfer
from spl.token.instructions import MintToParams, TransferParams, mint_to, transfer

from solapi.errors import DomainRuleError, InstructionBuildError
from solapi.svm.constants import (
    RENT_SYSVAR_ID,
    TOKEN_INITIALIZE_MINT_OPCODE,
    TOKEN_PROGRAM_ID,
    U64_MAX,
    U8_MAX,
)


def validate_amount(value: int, field: str) -> int:
    """Check that an amount is a positive u64.

    Raises:
        DomainRuleError: If value is zero, negative or larger than a u64.
    """
    if value <= 0:
        raise DomainRuleError(f"{field} must be greater than 0")
    if value > U64_MAX:
        raise DomainRuleError(f"{field} must fit in an unsigned 64-bit integer")
    return value


def validate_decimals(value: int, field: str = "decimals") -> int:
    """Check that decimals fits in a u8."""
    if not 0 <= value <= U8_MAX:
        raise DomainRuleError(f"{field} must be between 0 and {U8_MAX}")
    return value


def build_sol_transfer(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
    """
    Create a system program transfer instruction.

    Args:
        from_pubkey: Funding account, signs the transaction
        to_pubkey: Recipient account
        lamports: Amount to transfer in lamports

    Returns:
        Transfer instruction

    Raises:
        DomainRuleError: If lamports is zero or does not fit in a u64
    """
    validate_amount(lamports, "lamports")
    return system_transfer(
        SystemTransferParams(
            from_pubkey=from_pubkey,
            to_pubkey=to_pubkey,
            lamports=lamports,
        )
    )


def build_token_transfer(
    source: Pubkey,
    dest: Pubkey,
    owner: Pubkey,
    amount: int,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Create a transfer instruction for SPL tokens.

    Args:
        source: Source token account (the owner's associated token account)
        dest: Destination token account
        owner: Owner/authority of the source account
        amount: Amount to transfer (in atomic units)
        token_program_id: Token program ID

    Returns:
        Transfer instruction
    """
    validate_amount(amount, "amount")
    try:
        return transfer(
            TransferParams(
                program_id=token_program_id,
                source=source,
                dest=dest,
                owner=owner,
                amount=amount,
            )
        )
    except Exception as e:
        raise InstructionBuildError("Failed to create transfer instruction") from e


def build_initialize_mint(
    mint: Pubkey,
    mint_authority: Pubkey,
    freeze_authority: Pubkey | None,
    decimals: int,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Create an InitializeMint instruction.

    Data layout: opcode (u8), decimals (u8), mint authority (32 bytes), then
    the freeze authority as a COption: a single 0 byte when absent, or a 1
    byte followed by the 32-byte key.

    Args:
        mint: Mint account to initialize
        mint_authority: Account allowed to mint new tokens
        freeze_authority: Optional account allowed to freeze token accounts
        decimals: Number of base-10 digits to the right of the decimal point
        token_program_id: Token program ID

    Returns:
        InitializeMint instruction
    """
    validate_decimals(decimals)

    data = struct.pack("<BB", TOKEN_INITIALIZE_MINT_OPCODE, decimals) + bytes(mint_authority)
    if freeze_authority is None:
        data += b"\x00"
    else:
        data += b"\x01" + bytes(freeze_authority)

    return Instruction(
        program_id=token_program_id,
        data=data,
        accounts=[
            AccountMeta(pubkey=mint, is_signer=False, is_writable=True),
            AccountMeta(pubkey=RENT_SYSVAR_ID, is_signer=False, is_writable=False),
        ],
    )


def build_mint_to(
    mint: Pubkey,
    dest: Pubkey,
    authority: Pubkey,
    amount: int,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Create a MintTo instruction.

    Args:
        mint: Token mint address
        dest: Token account receiving the new tokens
        authority: Mint authority, signs the transaction
        amount: Amount to mint (in atomic units)
        token_program_id: Token program ID

    Returns:
        MintTo instruction
    """
    validate_amount(amount, "amount")
    try:
        return mint_to(
            MintToParams(
                program_id=token_program_id,
                mint=mint,
                dest=dest,
                mint_authority=authority,
                amount=amount,
            )
        )
    except Exception as e:
        raise InstructionBuildError("Failed to create mint instruction") from e
