"""Tests for Solana key material and Ed25519 signing."""

import os

import pytest
from solders.keypair import Keypair as SoldersKeypair
from solders.pubkey import Pubkey

from solapi.encoding import decode_base58, encode_base58
from solapi.errors import (
    ErrorKind,
    InvalidEncodingError,
    InvalidKeyMaterialError,
    InvalidSignatureError,
)
from solapi.svm.signing import (
    encode_signature,
    parse_signature,
    sign,
    signature_from_bytes,
    verify,
)
from solapi.svm.wallet import (
    Keypair,
    generate_keypair,
    keypair_from_base58,
    load_keypair,
    parse_pubkey,
    pubkey_from_bytes,
)


class TestSVMWallet:
    """Tests for SVM wallet functionality."""

    def test_generate_keypair(self):
        """Test keypair generation."""
        keypair = generate_keypair()
        assert isinstance(keypair, Keypair)
        assert len(keypair.address) > 0
        assert keypair.address == str(keypair.pubkey)
        assert len(keypair.secret) == 64
        assert keypair.secret[32:] == bytes(keypair.pubkey)

    def test_generate_keypair_is_random(self):
        """Test that each call produces a different key."""
        addresses = {generate_keypair().address for _ in range(20)}
        assert len(addresses) == 20

    def test_public_key_derives_from_seed(self):
        """Test the public half is the one derived from the seed."""
        keypair = generate_keypair()
        derived = SoldersKeypair.from_seed(keypair.secret[:32])
        assert derived.pubkey() == keypair.pubkey

    def test_load_keypair_roundtrip(self):
        """Test loading a keypair from its own secret bytes."""
        keypair = generate_keypair()
        loaded = load_keypair(keypair.secret)
        assert loaded == keypair
        assert loaded.address == keypair.address

    def test_keypair_from_base58(self):
        """Test loading a keypair from base58 text."""
        keypair = generate_keypair()
        loaded = keypair_from_base58(keypair.to_base58())
        assert loaded.pubkey == keypair.pubkey

    def test_keypair_from_base58_invalid(self):
        """Test creating keypair from invalid base58."""
        with pytest.raises(InvalidEncodingError):
            keypair_from_base58("invalid_key")

    @pytest.mark.parametrize("length", [0, 31, 32, 63, 65, 128])
    def test_load_keypair_wrong_length(self, length):
        """Test that only 64-byte secrets are accepted."""
        with pytest.raises(InvalidKeyMaterialError) as exc_info:
            load_keypair(os.urandom(length))
        assert exc_info.value.kind == ErrorKind.INVALID_KEY_MATERIAL

    def test_load_keypair_mismatched_public_half(self):
        """Test that a seed paired with someone else's public key is rejected."""
        first = generate_keypair()
        second = generate_keypair()
        with pytest.raises(InvalidKeyMaterialError):
            load_keypair(first.secret[:32] + bytes(second.pubkey))

    def test_keypair_is_immutable(self):
        """Test keypair attributes cannot be reassigned."""
        keypair = generate_keypair()
        with pytest.raises(AttributeError):
            keypair.pubkey = Pubkey.default()  # type: ignore[misc]
        with pytest.raises(AttributeError):
            keypair.extra = 1  # type: ignore[attr-defined]

    def test_keypair_repr(self):
        """Test string forms show the address only."""
        keypair = generate_keypair()
        assert str(keypair) == keypair.address
        assert repr(keypair) == f"Keypair({keypair.address})"


class TestSVMPubkey:
    """Tests for public key parsing."""

    def test_parse_pubkey(self):
        """Test parsing a base58 address."""
        keypair = generate_keypair()
        assert parse_pubkey(keypair.address) == keypair.pubkey

    def test_parse_pubkey_system_program(self):
        """Test parsing the all-zero address."""
        assert bytes(parse_pubkey("11111111111111111111111111111111")) == bytes(32)

    def test_parse_pubkey_invalid_encoding(self):
        """Test that non-base58 text is an encoding error."""
        with pytest.raises(InvalidEncodingError):
            parse_pubkey("0OIl")

    @pytest.mark.parametrize("length", [0, 1, 31, 33, 64])
    def test_parse_pubkey_wrong_length(self, length):
        """Test that only 32-byte values are public keys."""
        with pytest.raises(InvalidKeyMaterialError):
            parse_pubkey(encode_base58(os.urandom(length)))

    def test_pubkey_from_bytes(self):
        raw = os.urandom(32)
        assert bytes(pubkey_from_bytes(raw)) == raw


class TestSVMSigning:
    """Tests for Ed25519 signing and verification."""

    @pytest.mark.parametrize(
        "message",
        [b"", b"hello", "Hello, World! 世界".encode("utf-8"), os.urandom(1024)],
    )
    def test_sign_verify_roundtrip(self, keypair, message):
        """Test a signature verifies for its own key and message."""
        signature = sign(keypair, message)
        assert len(bytes(signature)) == 64
        assert verify(keypair.pubkey, message, signature) is True

    def test_sign_is_deterministic(self, keypair):
        """Test signing the same message twice gives the same signature."""
        assert sign(keypair, b"message") == sign(keypair, b"message")

    def test_verify_wrong_message(self, keypair):
        """Test a signature does not verify for another message."""
        signature = sign(keypair, b"first message")
        assert verify(keypair.pubkey, b"tampered", signature) is False

    def test_verify_wrong_key(self, keypair):
        """Test a signature does not verify for another key."""
        signature = sign(keypair, b"message")
        other = generate_keypair()
        assert verify(other.pubkey, b"message", signature) is False

    def test_single_bit_flip_fails_verification(self, keypair):
        """Test flipping any one bit of a signature makes it invalid."""
        message = b"bit flip"
        raw = bytes(sign(keypair, message))

        for bit in range(len(raw) * 8):
            mutated = bytearray(raw)
            mutated[bit // 8] ^= 1 << (bit % 8)
            signature = signature_from_bytes(bytes(mutated))
            assert verify(keypair.pubkey, message, signature) is False, f"bit {bit}"

    def test_parse_signature_roundtrip(self, keypair):
        """Test base58 signature text parses back to the same value."""
        signature = sign(keypair, b"text")
        text = encode_signature(signature)
        assert len(decode_base58(text)) == 64
        assert parse_signature(text) == signature

    @pytest.mark.parametrize("length", [0, 32, 63, 65])
    def test_parse_signature_wrong_length(self, length):
        """Test that only 64-byte values are signatures."""
        with pytest.raises(InvalidSignatureError) as exc_info:
            parse_signature(encode_base58(os.urandom(length)))
        assert exc_info.value.kind == ErrorKind.INVALID_SIGNATURE

    def test_parse_signature_invalid_encoding(self):
        with pytest.raises(InvalidEncodingError):
            parse_signature("not base58!")
