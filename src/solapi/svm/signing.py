"""Ed25519 message signing and verification."""

from solders.pubkey import Pubkey
from solders.signature import Signature

from solapi.encoding import decode_base58, encode_base58
from solapi.errors import InvalidSignatureError
from solapi.svm.constants import SIGNATURE_LENGTH
from solapi.svm.wallet import Keypair


def sign(keypair: Keypair, message: bytes) -> Signature:
    """Sign a message.

    Ed25519 signing is deterministic, so the same key and message always
    produce the same signature.

    Args:
        keypair: Keypair to sign with.
        message: Raw message bytes, may be empty.

    Returns:
        64-byte signature.
    """
    return keypair.keypair.sign_message(bytes(message))


def verify(pubkey: Pubkey, message: bytes, signature: Signature) -> bool:
    """Check a signature over a message.

    A signature that does not match is a normal outcome and yields False.

    Args:
        pubkey: Public key of the claimed signer.
        message: Raw message bytes.
        signature: Signature to check.

    Returns:
        True if the signature is valid for pubkey and message.
    """
    return signature.verify(pubkey, bytes(message))


def signature_from_bytes(raw: bytes) -> Signature:
    """Create a Signature from exactly 64 raw bytes.

    Raises:
        InvalidSignatureError: If raw is not 64 bytes long.
    """
    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidSignatureError(f"Signature must be {SIGNATURE_LENGTH} bytes")
    return Signature.from_bytes(bytes(raw))


def parse_signature(text: str) -> Signature:
    """Parse a base58-encoded signature.

    Raises:
        InvalidEncodingError: If the text is not base58.
        InvalidSignatureError: If the decoded value is not 64 bytes.
    """
    return signature_from_bytes(decode_base58(text))


def encode_signature(signature: Signature) -> str:
    """Encode a signature as base58 text."""
    return encode_base58(bytes(signature))
