"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .interval import Interval


def _reciprocal(t):
    if t == 0.0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def _fmax(a, b):
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a > b else b


def _fmin(a, b):
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a < b else b


@dataclass(frozen=True, slots=True)
class Aabb:
    """A box given by one interval per axis."""

    x: Interval = field(default_factory=Interval)
    y: Interval = field(default_factory=Interval)
    z: Interval = field(default_factory=Interval)

    def __add__(self, offset):
        return Aabb(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def pad(self):
        """Widen any axis thinner than 0.0001 so the box is never flat."""
        delta = 0.0001

        def padded(interval):
            return interval.expand(delta) if interval.size() < delta else interval

        return Aabb(padded(self.x), padded(self.y), padded(self.z))

    @staticmethod
    def empty():
        return Aabb(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)

    @staticmethod
    def from_boxes(box1, box2):
        """The smallest box enclosing both boxes."""
        return Aabb(
            Interval.union(box1.x, box2.x),
            Interval.union(box1.y, box2.y),
            Interval.union(box1.z, box2.z),
        )

    @staticmethod
    def from_points(a, b):
        """The box with ``a`` and ``b`` as opposite corners, in any order."""
        return Aabb(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z)),
        )

    def axis_interval(self, axis):
        """The interval for axis 1 (y) or 2 (z); any other value gives x."""
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        return self.x

    def hit(self, r, ray_t):
        """Whether the ray meets the box for some t inside ``ray_t``."""
        t_min, t_max = ray_t.min, ray_t.max
        for axis in range(3):
            interval = self.axis_interval(axis)
            inv_d = _reciprocal(r.direction[axis])
            orig = r.origin[axis]
            t0 = (interval.min - orig) * inv_d
            t1 = (interval.max - orig) * inv_d
            if t0 > t1:
                t0, t1 = t1, t0
            t_min = _fmax(t_min, t0)
            t_max = _fmin(t_max, t1)
            if t_max <= t_min:
                return False
        return True