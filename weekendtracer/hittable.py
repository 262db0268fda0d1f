"""Hit records, the hittable interface and instance transforms."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .aabb import Aabb
from .material import Lambertian, Material
from .ray import Ray
from .vec3 import Vec3, dot


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    front_face: bool = False
    material: Material = field(default_factory=Lambertian)
    u: float = 0.0
    v: float = 0.0

    def set_face_normal(self, r, outward_normal):
        """Store the normal facing against the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Something a ray can hit."""

    @abstractmethod
    def hit(self, r, ray_t):
        """The closest hit with t inside ``ray_t``, or None."""

    @abstractmethod
    def bounding_box(self):
        """The axis-aligned box enclosing the object."""


class Translate(Hittable):
    """An object moved by a fixed offset."""

    def __init__(self, obj, offset):
        self.object = obj
        self.offset = offset
        self.bbox = obj.bounding_box() + offset

    def hit(self, r, ray_t):
        moved = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.object.hit(moved, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self):
        return self.bbox


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj, angle):
        radians = math.radians(angle)
        self.object = obj
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        b = obj.bounding_box()
        lows = [math.inf] * 3
        highs = [-math.inf] * 3
        for x in (b.x.min, b.x.max):
            for y in (b.y.min, b.y.max):
                for z in (b.z.min, b.z.max):
                    corner = (
                        self.cos_theta * x + self.sin_theta * z,
                        y,
                        -self.sin_theta * x + self.cos_theta * z,
                    )
                    lows = [min(lo, c) for lo, c in zip(lows, corner)]
                    highs = [max(hi, c) for hi, c in zip(highs, corner)]
        self.bbox = Aabb.from_points(Vec3(*lows), Vec3(*highs))

    def _to_object(self, v):
        return Vec3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.cos_theta * v.z + self.sin_theta * v.x,
        )

    def _to_world(self, v):
        return Vec3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def hit(self, r, ray_t):
        rotated = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.object.hit(rotated, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self):
        return self.bbox