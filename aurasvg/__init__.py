"""AuraSVG — deterministic generative aura artwork and metadata.

Every output is a pure function of an ArtRecord:

    record = issue_record("0x" + "de" * 20, entropy=0x1234, sequence_index=1)
    svg = render_svg(record)
    token_uri = render_token_uri(record, display_id=1)
"""

from aurasvg.engine import compose, compose_context, issue_record, render_svg, select_category
from aurasvg.metadata.encoder import decode_data_uri, encode_data_uri, encode_metadata
from aurasvg.models.record import ArtRecord, Category
from aurasvg.svg.parser import parse_svg

__version__ = "0.1.0"


def render_token_uri(record: ArtRecord, display_id: int) -> str:
    """Metadata data URI embedding the canonical vector document for ``record``."""
    return encode_metadata(record, render_svg(record), display_id)


__all__ = [
    "ArtRecord",
    "Category",
    "select_category",
    "issue_record",
    "compose",
    "compose_context",
    "render_svg",
    "encode_metadata",
    "encode_data_uri",
    "decode_data_uri",
    "render_token_uri",
    "parse_svg",
]
