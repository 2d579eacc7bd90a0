"""Metadata document models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MetadataAttribute(BaseModel):
    trait_type: str
    value: str | int


class TokenMetadata(BaseModel):
    """JSON body wrapped by the metadata data URI. Field order is the serialized order."""

    name: str
    description: str
    attributes: list[MetadataAttribute] = Field(default_factory=list)
    image: str = ""
