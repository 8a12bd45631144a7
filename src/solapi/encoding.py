import base64
import binascii

import base58

from solapi.errors import InvalidEncodingError

BASE58_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")


def encode_base58(data: bytes) -> str:
    """Encode bytes to a base58 string (Bitcoin alphabet, no checksum).

    Args:
        data: Bytes to encode

    Returns:
        Base58 encoded string
    """
    return base58.b58encode(bytes(data)).decode("ascii")


def decode_base58(text: str) -> bytes:
    """Decode a base58 string to bytes.

    Args:
        text: Base58 encoded string

    Returns:
        Decoded bytes

    Raises:
        InvalidEncodingError: If text contains characters outside the alphabet
    """
    if not isinstance(text, str):
        raise InvalidEncodingError("Expected base58 text")
    # b58decode silently strips surrounding whitespace.
    if any(char not in BASE58_ALPHABET for char in text):
        raise InvalidEncodingError("Invalid base58 text")
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise InvalidEncodingError("Invalid base58 text") from e


def encode_base64(data: bytes) -> str:
    """Encode bytes to a standard, padded base64 string.

    Args:
        data: Bytes to encode

    Returns:
        Base64 encoded string
    """
    return base64.b64encode(bytes(data)).decode("utf-8")


def decode_base64(text: str) -> bytes:
    """Decode a standard base64 string to bytes.

    Padding is required and characters outside the standard alphabet are
    rejected rather than skipped.

    Args:
        text: Base64 encoded string

    Returns:
        Decoded bytes

    Raises:
        InvalidEncodingError: If text is not valid base64
    """
    if not isinstance(text, str):
        raise InvalidEncodingError("Expected base64 text")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError("Invalid base64 text") from e
