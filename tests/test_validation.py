"""Tests for request validation helpers."""

import os

import pytest

from solapi.encoding import encode_base58
from solapi.errors import (
    DomainRuleError,
    ErrorKind,
    InvalidEncodingError,
    InvalidKeyMaterialError,
    InvalidSignatureError,
    MissingFieldError,
)
from solapi.svm.constants import U64_MAX
from solapi.types import SendSolRequest, SignMessageRequest
from solapi.validation import (
    MISSING_FIELDS_MESSAGE,
    decode_base58_fields,
    encode_message,
    is_missing,
    require_fields,
    to_keypair,
    to_pubkey,
    to_signature,
    validate_amount,
    validate_decimals,
    validate_pubkeys,
)


class TestIsMissing:
    """Tests for is_missing function."""

    def test_missing_values(self) -> None:
        assert is_missing(None) is True
        assert is_missing("") is True

    def test_present_values(self) -> None:
        """Test that zero and whitespace count as present."""
        assert is_missing(0) is False
        assert is_missing(" ") is False
        assert is_missing("\n") is False
        assert is_missing("a") is False
        assert is_missing(False) is False


class TestRequireFields:
    """Tests for require_fields function."""

    def test_all_present(self, owner, recipient) -> None:
        request = SendSolRequest(from_=str(owner), to=str(recipient), lamports=0)
        require_fields(request, "from_", "to", "lamports")

    def test_missing_field(self) -> None:
        request = SendSolRequest(to="x", lamports=5)
        with pytest.raises(MissingFieldError) as exc_info:
            require_fields(request, "from_", "to", "lamports")
        assert exc_info.value.message == MISSING_FIELDS_MESSAGE
        assert exc_info.value.kind == ErrorKind.MISSING_FIELD

    def test_empty_strings_are_missing(self) -> None:
        """Test empty strings fail presence even when they would also fail decoding."""
        request = SignMessageRequest(message="", secret="")
        with pytest.raises(MissingFieldError):
            require_fields(request, "message", "secret")


class TestDecodeFields:
    """Tests for decoding and length checks."""

    def test_decode_reports_first_bad_field(self, owner) -> None:
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode_base58_fields({"from": str(owner), "to": "0OIl", "mint": "also bad!"})
        assert exc_info.value.message == "Invalid to encoding"

    def test_encoding_checked_before_length(self) -> None:
        """Test a bad encoding later in the request beats a bad length earlier."""
        short = encode_base58(os.urandom(10))
        with pytest.raises(InvalidEncodingError):
            validate_pubkeys({"from": short, "to": "not-base58!"})

    def test_validate_pubkeys(self, owner, recipient) -> None:
        keys = validate_pubkeys({"from": str(owner), "to": str(recipient)})
        assert keys == {"from": owner, "to": recipient}

    def test_to_pubkey_wrong_length(self) -> None:
        with pytest.raises(InvalidKeyMaterialError) as exc_info:
            to_pubkey(bytes(31), "mint")
        assert exc_info.value.message == "Invalid mint public key"

    def test_to_keypair(self, keypair) -> None:
        assert to_keypair(keypair.secret) == keypair
        with pytest.raises(InvalidKeyMaterialError) as exc_info:
            to_keypair(keypair.secret[:32])
        assert exc_info.value.message == "Invalid secret key"

    def test_to_signature(self) -> None:
        assert bytes(to_signature(bytes(64))) == bytes(64)
        with pytest.raises(InvalidSignatureError) as exc_info:
            to_signature(bytes(63))
        assert exc_info.value.message == "Invalid signature length"

    def test_encode_message(self) -> None:
        assert encode_message("héllo") == "héllo".encode("utf-8")
        with pytest.raises(InvalidEncodingError):
            encode_message("\ud800")


class TestDomainRules:
    """Tests for numeric domain rules."""

    def test_validate_amount(self) -> None:
        assert validate_amount(1, "amount") == 1
        assert validate_amount(U64_MAX, "amount") == U64_MAX

    @pytest.mark.parametrize("value", [0, -5, U64_MAX + 1])
    def test_validate_amount_rejects(self, value) -> None:
        with pytest.raises(DomainRuleError) as exc_info:
            validate_amount(value, "lamports")
        assert "lamports" in exc_info.value.message

    def test_validate_decimals(self) -> None:
        assert validate_decimals(0) == 0
        assert validate_decimals(9) == 9
        assert validate_decimals(255) == 255
        with pytest.raises(DomainRuleError):
            validate_decimals(256)
        with pytest.raises(DomainRuleError):
            validate_decimals(-1)
