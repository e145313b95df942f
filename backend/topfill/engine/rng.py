"""Seedable Mulberry32 generator — every randomized decision routes through one instance.

The stream is reproducible across platforms and across implementations of the
same 32-bit mix: two generators built from the same seed and consumed in the
same call order yield identical floats.
"""

from __future__ import annotations

import math
import secrets
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5
_TWO_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Low 32 bits of the product, as an unsigned int."""
    return (a * b) & _MASK32


class Mulberry32:
    """32-bit state, two xor-shift-multiply rounds, top bits normalized to [0, 1)."""

    def __init__(self, seed: int | None = None) -> None:
        self.seeded = seed is not None
        if seed is None:
            seed = secrets.randbits(32)
        self.seed = int(seed)
        self._state = self.seed & _MASK32

    def random(self) -> float:
        self._state = (self._state + _GOLDEN) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_32

    def int_in_range(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], both inclusive."""
        return math.floor(self.random() * (hi - lo + 1)) + lo

    def float_in_range(self, lo: float, hi: float) -> float:
        return self.random() * (hi - lo) + lo

    def pick(self, items: Sequence[T]) -> T:
        return items[self.int_in_range(0, len(items) - 1)]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """In-place reverse Fisher–Yates; returns ``items`` for chaining."""
        for i in range(len(items) - 1, 0, -1):
            j = self.int_in_range(0, i)
            items[i], items[j] = items[j], items[i]
        return items
