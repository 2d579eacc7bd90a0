"""Render an aura for an identity/entropy pair — developer preview tool.

Usage:
    python preview_aura.py 0xdeadbeef...  0x1234 -o aura.svg
    python preview_aura.py 0xdeadbeef...  0x1234 --metadata --display-id 7
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from aurasvg import issue_record, parse_svg, render_svg, render_token_uri
from aurasvg.config import configure_logging, settings


def _int(text: str) -> int:
    return int(text, 0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="AuraSVG preview — render one aura")
    parser.add_argument("identity", help="20-byte identity as 0x-prefixed hex")
    parser.add_argument("entropy", type=_int, help="Entropy (decimal or 0x hex)")
    parser.add_argument("--sequence", type=_int, default=0, help="Sequence index (default: 0)")
    parser.add_argument("--metadata", action="store_true", help="Emit the metadata data URI instead of SVG")
    parser.add_argument("--display-id", type=_int, default=0, help="Display ID used in the metadata name")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write to file instead of stdout")
    args = parser.parse_args(argv)

    load_dotenv()
    configure_logging(settings)

    try:
        record = issue_record(args.identity, args.entropy, args.sequence)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    if args.metadata:
        out = render_token_uri(record, args.display_id)
    else:
        out = render_svg(record)
        doc = parse_svg(out)
        print(
            f"{record.category.display_name}: {len(doc.elements)} elements, {len(out)} chars",
            file=sys.stderr,
        )

    if args.output:
        args.output.write_text(out, encoding="utf-8")
    else:
        sys.stdout.write(out + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
