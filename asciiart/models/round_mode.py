from __future__ import annotations

from enum import Enum


class RoundMode(Enum):
    """How a brightness that falls between two index keys is resolved.

    Also used as the direction of a resolution change (UP doubles, DOWN halves).
    """

    UP = "up"
    DOWN = "down"
    ABS = "abs"

    @classmethod
    def parse(cls, text: str) -> "RoundMode":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"unknown rounding mode: {text!r}") from None
