from __future__ import annotations

import numpy as np

from asciiart.errors import InvalidBlockError

# Rec. 709 luma weights
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722
RGB_MAX = 255.0

_WEIGHTS = np.array([RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT], dtype=np.float64)


def _luminance(pixels: np.ndarray) -> np.ndarray:
    # per-pixel gray in [0, 1]; last axis is RGB
    return (pixels.astype(np.float64) @ _WEIGHTS) / RGB_MAX


def block_brightness(block) -> float:
    """Average perceptual luminance of one (h, w, 3) block, in [0, 1]."""
    try:
        arr = np.asarray(block, dtype=np.float64)
    except ValueError as e:
        raise InvalidBlockError(f"block is not rectangular: {e}") from e
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise InvalidBlockError(f"expected an (h, w, 3) block, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidBlockError("block is empty")
    return float(np.clip(_luminance(arr).mean(), 0.0, 1.0))


def blocks_brightness(blocks: np.ndarray) -> np.ndarray:
    """Reduce a (rows, cols, size, size, 3) block grid to a (rows, cols) luminance grid."""
    blocks = np.asarray(blocks)
    if blocks.ndim != 5 or blocks.shape[4] != 3:
        raise InvalidBlockError(f"expected a (rows, cols, h, w, 3) block grid, got shape {blocks.shape}")
    if blocks.shape[2] == 0 or blocks.shape[3] == 0:
        raise InvalidBlockError("blocks are empty")
    return np.clip(_luminance(blocks).mean(axis=(2, 3)), 0.0, 1.0)
