#!/usr/bin/env python3
"""
Example: Rendering an SFEN Preview
==================================

This script demonstrates how to:
1. Find an SFEN record inside a line of text
2. Decode and inspect the position
3. Render it to SVG or PNG

Usage:
    python examples/preview_sfen.py "text with an sfen ..." -o board.svg
    python examples/preview_sfen.py --png --font /path/to/cjk.ttf -o board.png

Without text, the standard starting position is rendered.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import argparse
import logging

from sfen_preview.config import PreviewConfig
from sfen_preview.core.errors import SfenError
from sfen_preview.core.locator import locate
from sfen_preview.core.sfen import decode
from sfen_preview.logging_utils import get_logger
from sfen_preview.preview import SfenPreviewer
from sfen_preview.render.raster import RasterBackend
from sfen_preview.render.svg import SvgBackend

START_TEXT = "startpos: lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL b - 1"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render the SFEN found in TEXT")
    parser.add_argument("text", nargs="?", default=START_TEXT)
    parser.add_argument("-o", "--output", help="file to write (default: print a data URI)")
    parser.add_argument("--png", action="store_true", help="render PNG instead of SVG")
    parser.add_argument("--font", help="TrueType font with CJK glyphs (PNG only)")
    parser.add_argument("--font-size", type=float, default=30)
    parser.add_argument("--dark", action="store_true", help="draw for a dark background")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logger = get_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    print("=" * 60)
    print("SFEN Preview")
    print("=" * 60)

    try:
        sfen = locate(args.text)
        position = decode(sfen)
    except SfenError as e:
        logger.error("%s", e)
        return 1

    print(f"\nSFEN: {sfen}")
    print(position)

    backend = RasterBackend(args.font) if args.png else SvgBackend()
    config = PreviewConfig(font_size=args.font_size, text_color="white" if args.dark else "black")
    preview = SfenPreviewer(config, backend).render(sfen)

    if args.output:
        with open(args.output, "wb") as f:
            f.write(preview.data)
        print(f"\nWrote {len(preview.data)} bytes ({preview.mime_type}) to {args.output}")
    else:
        print("\n" + preview.data_uri())
    return 0


if __name__ == "__main__":
    sys.exit(main())
