"""Category Selector — identity -> one of the five categories.

category = int(sha256(identity_bytes), big-endian) mod 5. Entropy never enters.
"""

from __future__ import annotations

import hashlib

from aurasvg.models.record import IDENTITY_LENGTH, ArtRecord, Category, identity_to_bytes

CATEGORY_COUNT = len(Category)


def identity_digest(identity: bytes) -> int:
    """SHA-256 of the raw identity bytes, read as an unsigned big-endian integer."""
    if not isinstance(identity, (bytes, bytearray)):
        raise TypeError(f"Identity must be bytes, got {type(identity).__name__}")
    if len(identity) != IDENTITY_LENGTH:
        raise ValueError(f"Identity must be {IDENTITY_LENGTH} bytes, got {len(identity)}")
    return int.from_bytes(hashlib.sha256(bytes(identity)).digest(), "big")


def select_category(identity: bytes) -> Category:
    return Category(identity_digest(identity) % CATEGORY_COUNT)


def issue_record(identity: bytes | str, entropy: int, sequence_index: int = 0) -> ArtRecord:
    """Build a record at issuance time, deriving its category from the identity."""
    raw = identity_to_bytes(identity)
    return ArtRecord(
        identity=raw,
        entropy=entropy,
        category=select_category(raw),
        sequence_index=sequence_index,
    )
