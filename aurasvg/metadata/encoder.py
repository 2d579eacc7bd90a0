"""Metadata encoder — wraps a vector document in a base64 JSON data URI."""

from __future__ import annotations

import base64
import binascii
import logging

from aurasvg.models.metadata import MetadataAttribute, TokenMetadata
from aurasvg.models.record import ArtRecord

logger = logging.getLogger(__name__)

SVG_MIME = "image/svg+xml"
JSON_MIME = "application/json"

NAME_TEMPLATE = "Living Aura #{display_id}"
DESCRIPTION_TEMPLATE = (
    "A living aura of the {category} lineage, derived from its creator's identity and entropy."
)


def encode_data_uri(payload: str | bytes, mime: str) -> str:
    """``data:<mime>;base64,<payload>``. Text payloads are UTF-8 encoded first."""
    raw = payload.encode("utf-8") if isinstance(payload, str) else payload
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Inverse of ``encode_data_uri``: returns (mime, payload bytes)."""
    if not uri.startswith("data:"):
        raise ValueError("Not a data URI")
    header, sep, body = uri[len("data:"):].partition(",")
    if not sep:
        raise ValueError("Data URI has no payload separator")
    mime, _, encoding = header.partition(";")
    if encoding != "base64":
        raise ValueError(f"Unsupported data URI encoding: {encoding or 'none'}")
    try:
        return mime, base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Malformed base64 payload: {e}") from e


def build_metadata(record: ArtRecord, svg: str, display_id: int) -> TokenMetadata:
    if display_id < 0:
        raise ValueError(f"display_id must be non-negative, got {display_id}")
    category = record.category.display_name
    return TokenMetadata(
        name=NAME_TEMPLATE.format(display_id=display_id),
        description=DESCRIPTION_TEMPLATE.format(category=category),
        attributes=[
            MetadataAttribute(trait_type="Category", value=category),
            MetadataAttribute(trait_type="Creator", value=record.identity_hex),
            MetadataAttribute(trait_type="Sequence Block", value=record.sequence_index),
        ],
        image=encode_data_uri(svg, SVG_MIME),
    )


def encode_metadata(record: ArtRecord, svg: str, display_id: int) -> str:
    """Metadata document for ``record`` as a ``data:application/json;base64,`` URI."""
    metadata = build_metadata(record, svg, display_id)
    uri = encode_data_uri(metadata.model_dump_json(), JSON_MIME)
    logger.debug("Encoded metadata for #%d (%d chars)", display_id, len(uri))
    return uri
