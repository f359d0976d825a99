from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

from asciiart.errors import InvalidPartitionError

LOG = logging.getLogger(__name__)

WHITE = (255, 255, 255)


def next_power_of_two(n: int) -> int:
    power = 1
    while power < n:
        power *= 2
    return power


class Picture:
    """An RGB image held as a (height, width, 3) uint8 array."""

    def __init__(self, pixels: np.ndarray):
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"expected an (H, W, 3) pixel array, got shape {pixels.shape}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"invalid image dimensions: {pixels.shape[1]}x{pixels.shape[0]}")
        self.pixels = pixels

    @classmethod
    def open(cls, path: Union[str, Path]) -> "Picture":
        with Image.open(path) as img:
            picture = cls.from_image(img)
        LOG.debug("loaded %s (%dx%d)", path, picture.width, picture.height)
        return picture

    @classmethod
    def from_image(cls, img: Image.Image) -> "Picture":
        return cls(np.asarray(img.convert("RGB")))

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel(self, row: int, col: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[row, col]
        return int(r), int(g), int(b)

    def padded(self) -> "Picture":
        """Pad both dimensions up to a power of two with white, keeping the content centered."""
        new_w = next_power_of_two(self.width)
        new_h = next_power_of_two(self.height)
        if new_w == self.width and new_h == self.height:
            return self

        canvas = np.full((new_h, new_w, 3), WHITE, dtype=np.uint8)
        y_off = (new_h - self.height) // 2
        x_off = (new_w - self.width) // 2
        canvas[y_off:y_off + self.height, x_off:x_off + self.width] = self.pixels
        LOG.debug("padded %dx%d -> %dx%d", self.width, self.height, new_w, new_h)
        return Picture(canvas)

    def divide_into_blocks(self, block_size: int) -> np.ndarray:
        """
        Split into non-overlapping square blocks.

        Returns an array of shape (rows, cols, block_size, block_size, 3) where
        blocks[i, j] covers pixel rows i*size..(i+1)*size and columns j*size..(j+1)*size.
        """
        if block_size < 1:
            raise InvalidPartitionError(f"block size must be positive, got: {block_size}")
        if self.height % block_size or self.width % block_size:
            raise InvalidPartitionError(
                f"{self.width}x{self.height} image is not divisible into {block_size}px blocks"
            )
        rows = self.height // block_size
        cols = self.width // block_size
        return (
            self.pixels
            .reshape(rows, block_size, cols, block_size, 3)
            .swapaxes(1, 2)
        )

    def save(self, path: Union[str, Path]) -> None:
        Image.fromarray(self.pixels).save(path)
