from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

LOG = logging.getLogger(__name__)

DEFAULT_GLYPH_SIZE = 16
# cells at or above this gray level count as lit
LIT_THRESHOLD = 128

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def expand_user_and_vars(path: str) -> str:
    return os.path.expandvars(os.path.expanduser(path))


def try_load_font(font_path: str, font_size: int) -> Optional[ImageFont.FreeTypeFont]:
    try:
        return ImageFont.truetype(font_path, font_size)
    except (OSError, IOError):
        return None


def find_font(
    font_family: str,
    font_size: int,
    explicit_path: Optional[str] = None,
) -> Tuple[Font, str]:
    """
    Load the requested font family, falling back to Pillow's bundled font.

    Search order: explicit path, known font directories, FreeType by name.
    Returns (font, description of where it came from).
    """
    if explicit_path:
        path = expand_user_and_vars(explicit_path)
        font = try_load_font(path, font_size)
        if font is not None:
            return font, path
        LOG.warning("could not load font file %s, searching for %r", path, font_family)

    candidate_dirs = [
        "./assets/fonts",
        "./fonts",
        "/usr/share/fonts/truetype/msttcorefonts",
        "/usr/share/fonts/truetype/dejavu",
        "/Library/Fonts",
        os.path.expanduser("~/Library/Fonts"),
        "/System/Library/Fonts",
        "/System/Library/Fonts/Supplemental",
        "C:/Windows/Fonts",
    ]

    fam = font_family.strip()
    candidates = [
        f"{fam}.ttf",
        f"{fam}-Regular.ttf",
        f"{fam}.otf",
        f"{fam}.ttc",
        f"{fam.replace(' ', '_')}.ttf",
        f"{fam.replace(' ', '')}.ttf",
    ]
    for d in candidate_dirs:
        for f in candidates:
            path = os.path.join(expand_user_and_vars(d), f)
            if os.path.isfile(path):
                font = try_load_font(path, font_size)
                if font is not None:
                    return font, path

    # Try by font name via FreeType (not always supported)
    try:
        return ImageFont.truetype(fam, font_size), f"{fam} (system)"
    except (OSError, IOError):
        pass

    LOG.info("font %r not found, using Pillow default font", font_family)
    return ImageFont.load_default(size=font_size), "pillow default"


def draw_glyph_to_cell(ch: str, font: Font, size: int) -> Image.Image:
    """Draw `ch` in black, centered on a white `size` x `size` cell."""
    img = Image.new("L", (size, size), 255)
    draw = ImageDraw.Draw(img)
    left, top, right, bottom = draw.textbbox((0, 0), ch, font=font)
    tx = (size - (right - left)) // 2 - left
    ty = (size - (bottom - top)) // 2 - top
    draw.text((tx, ty), ch, font=font, fill=0)
    return img


class GlyphSampler:
    """Renders characters to fixed-size monochrome bitmaps and scores them.

    Instances are callable (`sampler(ch) -> float`) so they plug straight into
    `CharBrightnessIndex` as its brightness function.
    """

    def __init__(self,
                 font_family: str = "Courier New",
                 font_path: Optional[str] = None,
                 size: int = DEFAULT_GLYPH_SIZE):
        if size < 1:
            raise ValueError(f"glyph size must be positive, got: {size}")
        self.size = size
        self.font, self.font_source = find_font(font_family, size, font_path)
        LOG.debug("glyph font: %s (%dpx)", self.font_source, size)
        self._cache: Dict[str, float] = {}

    def bitmap(self, ch: str) -> np.ndarray:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got: {ch!r}")
        cell = draw_glyph_to_cell(ch, self.font, self.size)
        return np.asarray(cell) >= LIT_THRESHOLD

    def brightness(self, ch: str) -> float:
        if ch not in self._cache:
            self._cache[ch] = float(self.bitmap(ch).mean())
        return self._cache[ch]

    __call__ = brightness
