"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """An interval [min, max] on the real line."""

    min: float = 0.0
    max: float = 0.0

    def __add__(self, displacement):
        if not isinstance(displacement, (int, float)):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    __radd__ = __add__

    @staticmethod
    def union(a, b):
        """The smallest interval holding both ``a`` and ``b``."""
        return Interval(min(a.min, b.min), max(a.max, b.max))

    def size(self):
        return self.max - self.min

    def contains(self, x):
        """Inclusive membership test."""
        return self.min <= x <= self.max

    def surrounds(self, x):
        """Exclusive membership test."""
        return self.min < x < self.max

    def clamp(self, x):
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta):
        """Widen the interval by ``delta`` in total, half on each side."""
        padding = delta / 2.0
        return Interval(self.min - padding, self.max + padding)


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)