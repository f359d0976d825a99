from __future__ import annotations

import bisect
import math
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from asciiart.errors import (
    EmptyIndexError,
    EmptyInitError,
    IndexConsistencyError,
    OutOfBoundsError,
)
from asciiart.models.round_mode import RoundMode

BrightnessFn = Callable[[str], float]


class CharBrightnessIndex:
    """Maps an image brightness in [0, 1] to the character that best matches it.

    - Raw brightness of a character comes from the supplied `brightness` function
      (fraction of lit cells in its glyph) and is never cached here
    - Keys are raw brightness rescaled over the active set, so the darkest active
      character sits at 0.0 and the brightest at 1.0
    - Characters sharing a key live in one bucket, kept in code-point order
    - Any add/remove that moves the raw min or max triggers a full renormalization
    """

    def __init__(self,
                 chars: Iterable[str],
                 brightness: BrightnessFn,
                 round_mode: RoundMode = RoundMode.ABS):
        initial = set(chars)
        if not initial:
            raise EmptyInitError()
        self._brightness = brightness
        self.round_mode = round_mode
        self._chars: Set[str] = initial
        self._keys: List[float] = []
        self._buckets: Dict[float, List[str]] = {}
        self._min_raw: Optional[float] = None
        self._max_raw: Optional[float] = None
        self.renormalize()

    # ---- accessors ----
    @property
    def round_mode(self) -> RoundMode:
        return self._round_mode

    @round_mode.setter
    def round_mode(self, mode: RoundMode) -> None:
        if not isinstance(mode, RoundMode):
            raise TypeError(f"round mode must be a RoundMode, got {mode!r}")
        self._round_mode = mode

    @property
    def chars(self) -> Tuple[str, ...]:
        return tuple(sorted(self._chars))

    @property
    def min_raw(self) -> Optional[float]:
        return self._min_raw

    @property
    def max_raw(self) -> Optional[float]:
        return self._max_raw

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, c: object) -> bool:
        return c in self._chars

    def keys(self) -> List[float]:
        return list(self._keys)

    def items(self) -> Iterator[Tuple[float, Tuple[str, ...]]]:
        for key in self._keys:
            yield key, tuple(self._buckets[key])

    # ---- lookup ----
    def query(self, brightness: float) -> str:
        if not self._keys:
            raise EmptyIndexError()

        if len(self._keys) == 1:
            return self._buckets[self._keys[0]][0]

        bucket = self._buckets.get(brightness)
        if bucket is not None:
            return bucket[0]

        if math.isnan(brightness) or brightness < self._keys[0] or brightness > self._keys[-1]:
            raise OutOfBoundsError()

        i = bisect.bisect_left(self._keys, brightness)
        lower, higher = self._keys[i - 1], self._keys[i]
        match self._round_mode:
            case RoundMode.UP:
                key = higher
            case RoundMode.DOWN:
                key = lower
            case RoundMode.ABS:
                # ties go to the lower key
                key = lower if higher - brightness >= brightness - lower else higher
            case _:
                raise ValueError(f"unsupported round mode: {self._round_mode!r}")
        return self._buckets[key][0]

    # ---- membership mutations ----
    def add(self, c: str) -> None:
        if c in self._chars:
            return
        raw = self._brightness(c)
        self._chars.add(c)
        if self._min_raw is None or raw < self._min_raw or raw > self._max_raw:
            self.renormalize()
        else:
            self._insert(c, self._normalize(raw))

    def remove(self, c: str) -> None:
        if c not in self._chars:
            return
        raw = self._brightness(c)
        key = self._normalize(raw)
        bucket = self._buckets.get(key)
        if bucket is None or c not in bucket:
            raise IndexConsistencyError(f"no bucket holds {c!r} at key {key!r}")

        self._chars.discard(c)
        bucket.remove(c)
        if not bucket:
            del self._buckets[key]
            del self._keys[bisect.bisect_left(self._keys, key)]

        if raw == self._min_raw or raw == self._max_raw:
            self.renormalize()

    def renormalize(self) -> None:
        """Recompute the raw extremes and rebuild every bucket from scratch."""
        raws = {c: self._brightness(c) for c in self._chars}
        self._keys = []
        self._buckets = {}
        if not raws:
            self._min_raw = self._max_raw = None
            return

        self._min_raw = min(raws.values())
        self._max_raw = max(raws.values())
        for c, raw in raws.items():
            self._insert(c, self._normalize(raw))

    # ---- helpers ----
    def _normalize(self, raw: float) -> float:
        span = self._max_raw - self._min_raw
        if span == 0:
            return 0.0
        return (raw - self._min_raw) / span

    def _insert(self, c: str, key: float) -> None:
        bucket = self._buckets.get(key)
        if bucket is None:
            self._buckets[key] = [c]
            bisect.insort(self._keys, key)
        else:
            bisect.insort(bucket, c)
