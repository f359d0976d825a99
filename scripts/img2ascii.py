#!/usr/bin/env python3

"""
img2ascii.py: convert an image to ASCII art in one shot (no interactive shell).

Usage:
  python img2ascii.py input.jpg --resolution 64 --chars 0-9 --round abs --out out.txt
  python img2ascii.py input.jpg --html out.html

Notes:
- The image is padded to power-of-two dimensions with white before conversion.
- --resolution must be a power of two between the padded image's height divided by its width and its height.
- Characters are scored by rendering them with the configured font (see asciiart.yaml).
"""
import argparse
import sys
from pathlib import Path

from asciiart.errors import AsciiArtError, InsufficientCharsetError
from asciiart.imaging.picture import Picture
from asciiart.matching.char_index import BrightnessFn, CharBrightnessIndex
from asciiart.matching.glyphs import GlyphSampler
from asciiart.models.commands import expand_char_spec
from asciiart.models.round_mode import RoundMode
from asciiart.output.ascii_output import HtmlAsciiOutput
from asciiart.service.algorithm import AsciiArtAlgorithm
from asciiart.service.shell import MIN_CHARSET_SIZE
from asciiart.settings import settings


def to_ascii(
    picture: Picture,
    resolution: int,
    chars: list[str],
    round_mode: RoundMode,
    brightness: BrightnessFn | None = None,
) -> list[list[str]]:
    if brightness is None:
        brightness = GlyphSampler(settings.font_family, settings.font_path, settings.glyph_size)
    index = CharBrightnessIndex(chars, brightness, round_mode)
    if len(index) < MIN_CHARSET_SIZE:
        raise InsufficientCharsetError()
    return AsciiArtAlgorithm(picture.padded(), resolution, index).run()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser()
    parser.add_argument("input", help="Path to input image")
    parser.add_argument("--resolution", type=int, default=settings.default_resolution,
                        help=f"Characters per padded image height (default: {settings.default_resolution})")
    parser.add_argument("--chars", action="append", default=[],
                        help="Character spec: X, a-z, all or space (repeatable; default: settings charset)")
    parser.add_argument("--round", default=settings.default_round.value,
                        help="Rounding policy between brightness levels: up, down or abs")
    parser.add_argument("--html", type=str, default="", help="Write an HTML page to this file")
    parser.add_argument("--out", type=str, default="", help="Write result to this file instead of STDOUT")
    args = parser.parse_args(argv)

    # Validate arguments
    if args.resolution <= 0:
        print(f"Resolution must be positive, got: {args.resolution}", file=sys.stderr)
        sys.exit(1)

    try:
        round_mode = RoundMode.parse(args.round)
    except ValueError as e:
        print(f"Bad --round value: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        chars = sorted({c for spec in args.chars for c in expand_char_spec(spec)}) or list(settings.default_charset)
    except ValueError as e:
        print(f"Bad --chars value: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        picture = Picture.open(args.input)
    except (FileNotFoundError, PermissionError, OSError) as e:
        print(f"Failed to open image: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        art = to_ascii(picture, args.resolution, chars, round_mode)
    except AsciiArtError as e:
        print(f"Conversion failed: {e}", file=sys.stderr)
        sys.exit(1)

    if args.html:
        HtmlAsciiOutput(args.html, settings.html_font).out(art)

    text = "\n".join("".join(row) for row in art)
    if args.out:
        Path(args.out).write_text(text, encoding='utf-8')
    elif not args.html:
        print(text)

if __name__ == "__main__":
    main()
