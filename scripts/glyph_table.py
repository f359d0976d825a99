#!/usr/bin/env python3
"""
Print the brightness of each character in a charset, darkest first, and
optionally save an atlas of the 16x16 glyph bitmaps the scores come from.

Requirements:
  - Pillow (PIL), numpy

Example:
  python scripts/glyph_table.py --chars all --atlas glyphs.png --scale 4 --cols 16
"""

import argparse
import sys

import numpy as np
from PIL import Image

from asciiart.matching.char_index import CharBrightnessIndex
from asciiart.matching.glyphs import GlyphSampler
from asciiart.models.commands import expand_char_spec
from asciiart.settings import settings


def create_atlas_image(sampler: GlyphSampler, chars: list[str], cols: int, scale: int) -> Image.Image:
    size = sampler.size
    rows = (len(chars) + cols - 1) // cols
    atlas = np.full((rows * size, cols * size), 255, dtype=np.uint8)

    for idx, ch in enumerate(chars):
        r = idx // cols
        c = idx % cols
        y0 = r * size
        x0 = c * size
        atlas[y0:y0 + size, x0:x0 + size] = np.where(sampler.bitmap(ch), 255, 0)

    img = Image.fromarray(atlas)
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    return img


def display_char(ch: str) -> str:
    return repr(ch) if ch.isspace() else ch


def main() -> None:
    parser = argparse.ArgumentParser(description="Report glyph brightness for a charset.")
    parser.add_argument("--chars", action="append", default=[], help="Character spec: X, a-z, all or space (repeatable)")
    parser.add_argument("--font-family", default=settings.font_family, help="Font family name to search for")
    parser.add_argument("--font-path", default=settings.font_path, help="Explicit path to font file (.ttf/.otf)")
    parser.add_argument("--size", type=int, default=settings.glyph_size, help="Glyph bitmap size in cells")
    parser.add_argument("--atlas", default="", help="Save glyph bitmaps as a PNG atlas")
    parser.add_argument("--cols", type=int, default=16, help="Number of columns in the atlas grid")
    parser.add_argument("--scale", type=int, default=4, help="Atlas magnification")
    args = parser.parse_args()

    try:
        chars = sorted({c for spec in args.chars for c in expand_char_spec(spec)}) or sorted(settings.default_charset)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    sampler = GlyphSampler(args.font_family, args.font_path, args.size)
    print(f"Loaded font: {sampler.font_source}")

    index = CharBrightnessIndex(chars, sampler)
    print(f"{'Char':<6} {'Raw':<10} {'Normalized':<10}")
    print("-" * 28)
    for key, bucket in index.items():
        for ch in bucket:
            print(f"{display_char(ch):<6} {sampler(ch):<10.4f} {key:<10.4f}")

    if args.atlas:
        ordered = [ch for _, bucket in index.items() for ch in bucket]
        atlas = create_atlas_image(sampler, ordered, max(1, args.cols), max(1, args.scale))
        atlas.save(args.atlas, "PNG")
        print(f"Created atlas: {args.atlas} ({atlas.width}x{atlas.height})")


if __name__ == "__main__":
    main()
