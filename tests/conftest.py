"""Shared test fixtures."""

from __future__ import annotations

import hashlib

import pytest

from aurasvg.models.record import ArtRecord, Category

# 20-byte identity: DE AD BE EF repeated
DEADBEEF_IDENTITY = bytes.fromhex("deadbeef" * 5)
SCENARIO_ENTROPY = 0x123456789ABCDEF0123456789ABCDEF0


def expected_category(identity: bytes) -> Category:
    """Independent reimplementation of the selector rule."""
    return Category(int(hashlib.sha256(identity).hexdigest(), 16) % 5)


@pytest.fixture
def identity() -> bytes:
    return DEADBEEF_IDENTITY


@pytest.fixture
def scenario_record() -> ArtRecord:
    return ArtRecord(
        identity=DEADBEEF_IDENTITY,
        entropy=SCENARIO_ENTROPY,
        category=expected_category(DEADBEEF_IDENTITY),
        sequence_index=1,
    )


@pytest.fixture
def zero_record() -> ArtRecord:
    return ArtRecord(identity=DEADBEEF_IDENTITY, entropy=0, category=Category.EMBER, sequence_index=0)


@pytest.fixture
def category_of():
    return expected_category
