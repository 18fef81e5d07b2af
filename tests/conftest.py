"""Pytest fixtures for WOTS+ tests."""

import os

import pytest

from wotsplus import WOTSPlus, keccak_256


def number_to_bytes32(num: int) -> bytes:
    """Encode num as a 32-byte big-endian word (Solidity bytes32)."""
    return num.to_bytes(32, "big")


def weighted_sum(data: bytes) -> bytes:
    """
    One-byte digest sum((k + 1) * data[k]) + 1 mod 256.

    Order sensitive and small enough to evaluate by hand for n=1.
    """
    return bytes([(sum((k + 1) * b for k, b in enumerate(data)) + 1) % 256])


def fixture_path(name: str) -> str:
    return os.path.join(os.path.dirname(__file__), "fixtures", name)


@pytest.fixture
def wots():
    """Default scheme: Keccak-256, n=32, w=16."""
    return WOTSPlus(keccak_256)


@pytest.fixture
def private_seed():
    return number_to_bytes32(1)


@pytest.fixture
def public_seed():
    return number_to_bytes32(2)


@pytest.fixture
def message():
    """32-byte message 00 01 02 .. 1f."""
    return bytes(range(32))


@pytest.fixture
def keypair(wots, private_seed, public_seed):
    return wots.generate_key_pair(private_seed, public_seed)
