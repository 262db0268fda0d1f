"""Volumes of constant density such as smoke or fog."""

from __future__ import annotations

import math

from .common import INFINITY, random_double
from .hittable import HitRecord, Hittable
from .interval import Interval
from .material import Isotropic
from .texture import SolidColor
from .vec3 import Vec3


class ConstantMedium(Hittable):
    """A participating medium filling a convex ``boundary``."""

    def __init__(self, boundary, density, texture):
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density if density != 0.0 else -math.inf
        self.phase_function = Isotropic(texture)

    @classmethod
    def from_color(cls, boundary, density, color):
        return cls(boundary, density, SolidColor(color))

    def hit(self, r, ray_t):
        rec1 = self.boundary.hit(r, Interval.UNIVERSE)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(r, Interval(rec1.t + 0.0001, INFINITY))
        if rec2 is None:
            return None

        t1 = max(rec1.t, ray_t.min)
        t2 = min(rec2.t, ray_t.max)
        if t1 >= t2:
            return None
        t1 = max(t1, 0.0)

        ray_length = r.direction.length()
        distance_inside_boundary = (t2 - t1) * ray_length
        sample = random_double()
        log_sample = math.log(sample) if sample > 0.0 else -math.inf
        hit_distance = self.neg_inv_density * log_sample
        if hit_distance > distance_inside_boundary:
            return None

        t = t1 + hit_distance / ray_length
        return HitRecord(
            p=r.at(t),
            normal=Vec3(1.0, 0.0, 0.0),
            t=t,
            front_face=True,
            material=self.phase_function,
        )

    def bounding_box(self):
        return self.boundary.bounding_box()