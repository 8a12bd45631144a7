"""Solana key material utilities."""

from solders.keypair import Keypair as SoldersKeypair
from solders.pubkey import Pubkey

from solapi.encoding import decode_base58, encode_base58
from solapi.errors import InvalidKeyMaterialError
from solapi.svm.constants import PUBKEY_LENGTH, SECRET_KEY_LENGTH, SEED_LENGTH


class Keypair:
    """Immutable wrapper around a Solders Keypair."""

    __slots__ = ("_keypair",)

    def __init__(self, keypair: SoldersKeypair):
        self._keypair = keypair

    @property
    def keypair(self) -> SoldersKeypair:
        """Get the underlying Solders keypair."""
        return self._keypair

    @property
    def pubkey(self) -> Pubkey:
        """Get the public key."""
        return self._keypair.pubkey()

    @property
    def address(self) -> str:
        """Get the base58-encoded address."""
        return str(self.pubkey)

    @property
    def secret(self) -> bytes:
        """Get the 64-byte secret key (seed followed by public key)."""
        return bytes(self._keypair)

    def to_base58(self) -> str:
        """Get the base58-encoded 64-byte secret key."""
        return encode_base58(self.secret)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keypair):
            return NotImplemented
        return self.secret == other.secret

    def __hash__(self) -> int:
        return hash(self.pubkey)

    def __str__(self) -> str:
        return self.address

    def __repr__(self) -> str:
        return f"Keypair({self.address})"


def generate_keypair() -> Keypair:
    """
    Generate a new random keypair.

    Each call draws a fresh seed from the operating system's CSPRNG.

    Returns:
        Keypair instance
    """
    return Keypair(SoldersKeypair())


def load_keypair(secret_bytes: bytes) -> Keypair:
    """
    Create a Keypair from raw secret bytes.

    Args:
        secret_bytes: 64-byte secret key (32-byte seed + 32-byte public key)

    Returns:
        Keypair instance

    Raises:
        InvalidKeyMaterialError: If the length is wrong or the public half
            does not belong to the seed
    """
    if len(secret_bytes) != SECRET_KEY_LENGTH:
        raise InvalidKeyMaterialError(
            f"Secret key must be {SECRET_KEY_LENGTH} bytes"
        )

    seed = bytes(secret_bytes[:SEED_LENGTH])
    try:
        solders_keypair = SoldersKeypair.from_seed(seed)
    except ValueError as e:
        raise InvalidKeyMaterialError("Invalid secret key") from e

    if bytes(solders_keypair.pubkey()) != bytes(secret_bytes[SEED_LENGTH:]):
        raise InvalidKeyMaterialError("Secret key does not match its public key")

    return Keypair(solders_keypair)


def keypair_from_base58(private_key: str) -> Keypair:
    """
    Create a Keypair from a base58-encoded secret key.

    Args:
        private_key: Base58-encoded secret key (64 bytes)

    Returns:
        Keypair instance

    Raises:
        InvalidEncodingError: If the text is not base58
        InvalidKeyMaterialError: If the decoded bytes are not a keypair
    """
    return load_keypair(decode_base58(private_key))


def pubkey_from_bytes(raw: bytes) -> Pubkey:
    """
    Create a Pubkey from exactly 32 raw bytes.

    Raises:
        InvalidKeyMaterialError: If raw is not 32 bytes long
    """
    if len(raw) != PUBKEY_LENGTH:
        raise InvalidKeyMaterialError(f"Public key must be {PUBKEY_LENGTH} bytes")
    return Pubkey.from_bytes(bytes(raw))


def parse_pubkey(address: str) -> Pubkey:
    """
    Parse a base58-encoded public key.

    Args:
        address: Base58-encoded 32-byte public key

    Returns:
        Pubkey instance

    Raises:
        InvalidEncodingError: If the text is not base58
        InvalidKeyMaterialError: If the decoded value is not 32 bytes
    """
    return pubkey_from_bytes(decode_base58(address))
