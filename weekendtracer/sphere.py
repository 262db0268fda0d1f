"""Spheres, either fixed or moving linearly over the shutter interval."""

from __future__ import annotations

import math

from .aabb import Aabb
from .common import PI
from .hittable import HitRecord, Hittable
from .vec3 import Vec3, dot


def get_sphere_uv(p):
    """Texture coordinates (u, v) of a point ``p`` on the unit sphere."""
    y = -p.y
    if y > 1.0:
        y = 1.0
    elif y < -1.0:
        y = -1.0
    theta = math.acos(y)
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2.0 * PI), theta / PI


class Sphere(Hittable):
    """A sphere with a material; see :meth:`moving` for motion-blurred ones."""

    def __init__(self, center, radius, material):
        self.center1 = center
        self.radius = radius
        self.material = material
        self.is_moving = False
        self.center_vec = Vec3()
        rvec = Vec3(radius, radius, radius)
        self.bbox = Aabb.from_points(center - rvec, center + rvec)

    @classmethod
    def moving(cls, center1, center2, radius, material):
        """A sphere whose centre moves from ``center1`` at time 0 to ``center2`` at time 1."""
        sphere = cls(center1, radius, material)
        sphere.is_moving = True
        sphere.center_vec = center2 - center1
        rvec = Vec3(radius, radius, radius)
        sphere.bbox = Aabb.from_boxes(
            sphere.bbox, Aabb.from_points(center2 - rvec, center2 + rvec)
        )
        return sphere

    def center(self, time):
        """The centre at the given time."""
        if self.is_moving:
            return self.center1 + time * self.center_vec
        return self.center1

    def hit(self, r, ray_t):
        cur_center = self.center(r.time)
        oc = cur_center - r.origin
        a = r.direction.length_squared()
        if a == 0.0:
            return None
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - cur_center) / self.radius
        u, v = get_sphere_uv(outward_normal)
        rec = HitRecord(p=p, t=root, material=self.material, u=u, v=v)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self):
        return self.bbox