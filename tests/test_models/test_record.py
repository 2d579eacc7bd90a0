"""Tests for the ArtRecord model."""

import pytest
from pydantic import ValidationError

from aurasvg.models.record import ArtRecord, Category, identity_to_bytes, identity_to_str

IDENT = bytes(range(20))


def test_accepts_raw_bytes():
    rec = ArtRecord(identity=IDENT, entropy=5, category=Category.TIDE, sequence_index=3)
    assert rec.identity == IDENT
    assert rec.sequence_index == 3


def test_accepts_hex_string_with_and_without_prefix():
    a = ArtRecord(identity="0x" + IDENT.hex(), entropy=1, category=Category.EMBER)
    b = ArtRecord(identity=IDENT.hex().upper(), entropy=1, category=Category.EMBER)
    assert a.identity == b.identity == IDENT


def test_identity_hex_is_lowercase_prefixed():
    rec = ArtRecord(identity=bytes.fromhex("DEADBEEF" * 5), entropy=0, category=Category.EMBER)
    assert rec.identity_hex == "0x" + "deadbeef" * 5
    assert len(rec.identity_hex) == 42


@pytest.mark.parametrize("bad", [b"\x00" * 19, b"\x00" * 32, "0x1234", "zz" * 20, 12345])
def test_rejects_malformed_identity(bad):
    with pytest.raises(ValidationError):
        ArtRecord(identity=bad, entropy=0, category=Category.EMBER)


def test_accepts_entropy_beyond_256_bits():
    rec = ArtRecord(identity=IDENT, entropy=(1 << 1000) + 7, category=Category.NEBULA)
    assert rec.entropy == (1 << 1000) + 7


@pytest.mark.parametrize("bad", [-1, True, 1.5, "42"])
def test_rejects_bad_entropy(bad):
    with pytest.raises(ValidationError):
        ArtRecord(identity=IDENT, entropy=bad, category=Category.EMBER)


@pytest.mark.parametrize("bad", [5, -1, 99, "Ember", True])
def test_rejects_category_outside_enum(bad):
    with pytest.raises(ValidationError):
        ArtRecord(identity=IDENT, entropy=0, category=bad)


def test_category_from_int():
    rec = ArtRecord(identity=IDENT, entropy=0, category=4)
    assert rec.category is Category.AURORA


def test_rejects_negative_sequence_index():
    with pytest.raises(ValidationError):
        ArtRecord(identity=IDENT, entropy=0, category=Category.EMBER, sequence_index=-1)


def test_record_is_frozen():
    rec = ArtRecord(identity=IDENT, entropy=0, category=Category.EMBER)
    with pytest.raises(ValidationError):
        rec.entropy = 1


def test_category_display_names():
    assert [c.display_name for c in Category] == ["Ember", "Tide", "Verdant", "Nebula", "Aurora"]


def test_identity_helpers_round_trip():
    assert identity_to_bytes(identity_to_str(IDENT)) == IDENT


def test_identity_helper_type_error():
    with pytest.raises(TypeError):
        identity_to_bytes(None)
