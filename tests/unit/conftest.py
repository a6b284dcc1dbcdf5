"""Shared fixtures: deterministic checksum addresses."""

import pytest
from eth_utils import to_checksum_address


SAFE = to_checksum_address("0x" + "5afe" * 10)


def make_address(seed: int) -> str:
    """Checksum address derived from a small integer."""
    return to_checksum_address(f"0x{0xabc0000 + seed:040x}")


@pytest.fixture
def safe_address() -> str:
    return SAFE


@pytest.fixture
def owners():
    """Letter -> checksum address, A..L."""
    return {letter: make_address(i) for i, letter in enumerate("ABCDEFGHIJKL")}
