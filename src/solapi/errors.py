"""Error taxonomy for solapi operations."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported by the core."""

    MISSING_FIELD = "MissingField"
    INVALID_ENCODING = "InvalidEncoding"
    INVALID_KEY_MATERIAL = "InvalidKeyMaterial"
    INVALID_SIGNATURE = "InvalidSignature"
    DOMAIN_RULE_VIOLATION = "DomainRuleViolation"
    DERIVATION_ERROR = "DerivationError"
    INSTRUCTION_BUILD_ERROR = "InstructionBuildError"


class SolapiError(Exception):
    """Base class for errors raised by solapi.

    Attributes:
        kind: Category of the failure.
        message: Human readable cause, safe to return to callers.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldError(SolapiError):
    """Raised when a required request field is absent or empty."""

    kind = ErrorKind.MISSING_FIELD


class InvalidEncodingError(SolapiError):
    """Raised when base58/base64 text cannot be decoded."""

    kind = ErrorKind.INVALID_ENCODING


class InvalidKeyMaterialError(SolapiError):
    """Raised when key bytes have the wrong length or do not form a keypair."""

    kind = ErrorKind.INVALID_KEY_MATERIAL


class InvalidSignatureError(SolapiError):
    """Raised when signature bytes have the wrong length."""

    kind = ErrorKind.INVALID_SIGNATURE


class DomainRuleError(SolapiError):
    """Raised when a value is well-formed but outside the allowed range."""

    kind = ErrorKind.DOMAIN_RULE_VIOLATION


class DerivationError(SolapiError):
    """Raised when no program-derived address can be produced."""

    kind = ErrorKind.DERIVATION_ERROR


class InstructionBuildError(SolapiError):
    """Raised when the token library rejects instruction parameters."""

    kind = ErrorKind.INSTRUCTION_BUILD_ERROR
