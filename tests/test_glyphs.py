from __future__ import annotations

import numpy as np
import pytest

from asciiart.matching.char_index import CharBrightnessIndex
from asciiart.matching.glyphs import GlyphSampler, find_font


@pytest.fixture(scope="module")
def sampler():
    # unknown family -> Pillow's bundled font, same on every machine
    return GlyphSampler(font_family="No Such Font Family", size=16)


def test_bitmap_shape(sampler):
    bitmap = sampler.bitmap("A")
    assert bitmap.shape == (16, 16)
    assert bitmap.dtype == np.bool_


def test_space_is_fully_lit(sampler):
    assert sampler.brightness(" ") == 1.0


def test_ink_darkens(sampler):
    assert 0.0 <= sampler.brightness("@") < 1.0
    assert sampler.brightness("@") < sampler.brightness(".")


def test_brightness_is_stable(sampler):
    other = GlyphSampler(font_family="No Such Font Family", size=16)
    for ch in "0123456789#@.":
        assert sampler(ch) == sampler.brightness(ch) == other.brightness(ch)


def test_single_characters_only(sampler):
    with pytest.raises(ValueError):
        sampler.bitmap("ab")


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        GlyphSampler(size=0)


def test_missing_font_file_falls_back():
    font, source = find_font("No Such Font Family", 12, explicit_path="/nonexistent/font.ttf")
    assert font is not None
    assert source == "pillow default"


def test_sampler_feeds_index(sampler):
    index = CharBrightnessIndex("@. ", sampler)
    assert index.query(1.0) == " "
    assert index.query(0.0) == "@"
