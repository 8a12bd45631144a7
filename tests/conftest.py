"""Shared fixtures for solapi tests."""

import pytest
from solders.pubkey import Pubkey

from solapi.svm.wallet import Keypair, generate_keypair


@pytest.fixture
def keypair() -> Keypair:
    return generate_keypair()


@pytest.fixture
def owner() -> Pubkey:
    return generate_keypair().pubkey


@pytest.fixture
def recipient() -> Pubkey:
    return generate_keypair().pubkey


@pytest.fixture
def mint() -> Pubkey:
    return generate_keypair().pubkey
