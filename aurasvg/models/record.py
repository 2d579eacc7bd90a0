"""Art record model — the only input the renderer needs."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

IDENTITY_LENGTH = 20


class Category(enum.IntEnum):
    """The five fixed art styles. Values are the selector's ``hash mod 5`` result."""

    EMBER = 0
    TIDE = 1
    VERDANT = 2
    NEBULA = 3
    AURORA = 4

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


def identity_to_bytes(value: Any) -> bytes:
    """Accept raw bytes or a (optionally 0x-prefixed) hex string."""
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        text = value[2:] if value[:2].lower() == "0x" else value
        try:
            raw = bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Identity is not valid hex: {value!r}") from e
    else:
        raise TypeError(f"Identity must be bytes or hex str, got {type(value).__name__}")
    if len(raw) != IDENTITY_LENGTH:
        raise ValueError(f"Identity must be {IDENTITY_LENGTH} bytes, got {len(raw)}")
    return raw


def identity_to_str(identity: bytes) -> str:
    """Canonical string form: 0x + 40 lowercase hex digits."""
    return "0x" + identity.hex()


class ArtRecord(BaseModel):
    """Immutable per-item record supplied by the issuance layer."""

    model_config = ConfigDict(frozen=True)

    identity: bytes = Field(..., description="20-byte creator identity")
    entropy: StrictInt = Field(..., ge=0, description="Unsigned entropy, any bit width")
    category: Category
    sequence_index: StrictInt = Field(default=0, ge=0)

    @field_validator("identity", mode="before")
    @classmethod
    def _normalize_identity(cls, value: Any) -> bytes:
        try:
            return identity_to_bytes(value)
        except TypeError as e:
            # pydantic only wraps ValueError/AssertionError into ValidationError
            raise ValueError(str(e)) from e

    @field_validator("category", mode="before")
    @classmethod
    def _strict_category(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Category must be an int enum member, got {value!r}")
        return value

    @property
    def identity_hex(self) -> str:
        return identity_to_str(self.identity)
