from __future__ import annotations

from typing import List

from asciiart.imaging.picture import Picture
from asciiart.matching.char_index import CharBrightnessIndex
from asciiart.models.round_mode import RoundMode
from asciiart.service.reducer import blocks_brightness

RES_MULTIPLIER = 2


class AsciiArtAlgorithm:
    """Turns a padded picture into a character grid.

    The picture is cut into square blocks of `height // resolution` pixels; each
    block's luminance is looked up in the character index.
    """

    def __init__(self, picture: Picture, resolution: int, index: CharBrightnessIndex):
        self.picture = picture
        self._resolution = resolution
        self.index = index

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def min_resolution(self) -> int:
        # resolution counts rows; blocks may not be wider than the picture
        res = 1
        while self.picture.height // res > self.picture.width:
            res *= RES_MULTIPLIER
        return res

    @property
    def max_resolution(self) -> int:
        # one-pixel blocks
        return self.picture.height

    def set_resolution(self, direction: RoundMode) -> None:
        """Double (UP) or halve (DOWN) the resolution. Bounds are the caller's concern."""
        match direction:
            case RoundMode.UP:
                self._resolution *= RES_MULTIPLIER
            case RoundMode.DOWN:
                self._resolution //= RES_MULTIPLIER
            case _:
                raise ValueError(f"resolution can only go up or down, got: {direction!r}")

    def run(self) -> List[List[str]]:
        block_size = self.picture.height // self._resolution if self._resolution > 0 else 0
        blocks = self.picture.divide_into_blocks(block_size)
        brightness = blocks_brightness(blocks)
        return [
            [self.index.query(float(value)) for value in row]
            for row in brightness
        ]
