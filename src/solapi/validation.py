"""Request validation.

Checks run in a fixed order and stop at the first failure:

1. every required field is present (``None`` and ``""`` are missing),
2. every text field decodes in its canonical encoding,
3. decoded values have the right length / form a valid key,
4. numeric fields satisfy their domain rules.

Each helper raises a :class:`~solapi.errors.SolapiError` subclass whose
message is safe to hand back to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from solders.pubkey import Pubkey
from solders.signature import Signature

from solapi.encoding import decode_base58
from solapi.errors import (
    InvalidEncodingError,
    InvalidKeyMaterialError,
    InvalidSignatureError,
    MissingFieldError,
)
from solapi.svm.instructions import validate_amount, validate_decimals
from solapi.svm.signing import signature_from_bytes
from solapi.svm.wallet import Keypair, load_keypair, pubkey_from_bytes

MISSING_FIELDS_MESSAGE = "Missing required fields"


def is_missing(value: Any) -> bool:
    """Check whether a field value counts as absent.

    Numeric zero and whitespace-only strings are present; only ``None`` and
    the empty string are not.
    """
    return value is None or value == ""


def require_fields(request: BaseModel, *names: str) -> None:
    """Ensure every named field of a request model is present.

    Args:
        request: Parsed request model.
        names: Python attribute names of the required fields.

    Raises:
        MissingFieldError: If any field is missing.
    """
    if any(is_missing(getattr(request, name, None)) for name in names):
        raise MissingFieldError(MISSING_FIELDS_MESSAGE)


def decode_base58_fields(fields: Mapping[str, str]) -> dict[str, bytes]:
    """Decode several base58 fields, in order, before any length check.

    Args:
        fields: Mapping of wire field name to base58 text.

    Returns:
        Mapping of wire field name to decoded bytes.

    Raises:
        InvalidEncodingError: Naming the first field that is not base58.
    """
    decoded = {}
    for field, value in fields.items():
        try:
            decoded[field] = decode_base58(value)
        except InvalidEncodingError as e:
            raise InvalidEncodingError(f"Invalid {field} encoding") from e
    return decoded


def to_pubkey(raw: bytes, field: str) -> Pubkey:
    """Convert decoded bytes to a public key.

    Raises:
        InvalidKeyMaterialError: If raw is not 32 bytes.
    """
    try:
        return pubkey_from_bytes(raw)
    except InvalidKeyMaterialError as e:
        raise InvalidKeyMaterialError(f"Invalid {field} public key") from e


def to_keypair(raw: bytes, field: str = "secret") -> Keypair:
    """Convert decoded bytes to a keypair.

    Raises:
        InvalidKeyMaterialError: If raw is not a 64-byte keypair.
    """
    try:
        return load_keypair(raw)
    except InvalidKeyMaterialError as e:
        raise InvalidKeyMaterialError(f"Invalid {field} key") from e


def to_signature(raw: bytes, field: str = "signature") -> Signature:
    """Convert decoded bytes to a signature.

    Raises:
        InvalidSignatureError: If raw is not 64 bytes.
    """
    try:
        return signature_from_bytes(raw)
    except InvalidSignatureError as e:
        raise InvalidSignatureError(f"Invalid {field} length") from e


def encode_message(message: str) -> bytes:
    """Get the UTF-8 bytes of a text message.

    Raises:
        InvalidEncodingError: If the text holds unpaired surrogates.
    """
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEncodingError("Invalid message encoding") from e


def validate_pubkeys(fields: Mapping[str, str]) -> dict[str, Pubkey]:
    """Decode then length-check several base58 public key fields."""
    decoded = decode_base58_fields(fields)
    return {field: to_pubkey(raw, field) for field, raw in decoded.items()}


__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "decode_base58_fields",
    "encode_message",
    "is_missing",
    "require_fields",
    "to_keypair",
    "to_pubkey",
    "to_signature",
    "validate_amount",
    "validate_decimals",
    "validate_pubkeys",
]
