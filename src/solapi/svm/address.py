"""Program-derived and associated token account addresses.

A program-derived address (PDA) is hashed from a list of seeds and the owning
program id. Only hashes that are *not* valid ed25519 curve points are
accepted, so no private key can exist for the resulting address. The bump
seed search (255 down to 0) is done by solders.
"""

from __future__ import annotations

from collections.abc import Sequence

from solders.pubkey import Pubkey

from solapi.errors import DerivationError
from solapi.svm.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    MAX_SEED_LENGTH,
    MAX_SEEDS,
    TOKEN_PROGRAM_ID,
)


def find_program_address(
    seeds: Sequence[bytes], program_id: Pubkey
) -> tuple[Pubkey, int]:
    """Find the first off-curve program address, searching bump seeds 255..0.

    Args:
        seeds: Seed byte strings, not including the bump.
        program_id: Program that owns the derived address.

    Returns:
        Tuple of (address, bump).

    Raises:
        DerivationError: If the seeds break protocol limits or no bump seed
            yields a valid address.
    """
    # The bump takes one of the seed slots.
    if len(seeds) >= MAX_SEEDS:
        raise DerivationError(f"At most {MAX_SEEDS - 1} seeds are allowed")
    if any(len(seed) > MAX_SEED_LENGTH for seed in seeds):
        raise DerivationError(f"Seeds must be at most {MAX_SEED_LENGTH} bytes")

    try:
        return Pubkey.find_program_address([bytes(seed) for seed in seeds], program_id)
    except Exception as e:
        raise DerivationError("Unable to find a viable program address bump seed") from e


def derive_associated_address(
    owner: Pubkey, mint: Pubkey, token_program_id: Pubkey = TOKEN_PROGRAM_ID
) -> Pubkey:
    """
    Get the associated token account address for an owner and mint.

    Args:
        owner: Wallet that owns the token account
        mint: Token mint address
        token_program_id: Token program ID (default: TOKEN_PROGRAM_ID)

    Returns:
        Associated token account address
    """
    address, _bump = find_program_address(
        [bytes(owner), bytes(token_program_id), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )
    return address
