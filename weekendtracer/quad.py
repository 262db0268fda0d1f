"""Planar parallelograms and boxes built from them."""

from __future__ import annotations

from .aabb import Aabb
from .hittable import HitRecord, Hittable
from .hittable_list import HittableList
from .interval import Interval
from .vec3 import Vec3, cross, dot, unit_vector

_UNIT_INTERVAL = Interval(0.0, 1.0)


class Quad(Hittable):
    """The parallelogram with corner ``q`` and edges ``u`` and ``v``."""

    def __init__(self, q, u, v, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material
        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        bbox1 = Aabb.from_points(q, q + u + v)
        bbox2 = Aabb.from_points(q + u, q + v)
        self.bbox = Aabb.from_boxes(bbox1, bbox2)

    def is_interior(self, a, b):
        """Whether planar coordinates (a, b) fall inside the quad, edges included."""
        return _UNIT_INTERVAL.contains(a) and _UNIT_INTERVAL.contains(b)

    def hit(self, r, ray_t):
        denom = dot(self.normal, r.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar = intersection - self.q
        alpha = dot(self.w, cross(planar, self.v))
        beta = dot(self.w, cross(self.u, planar))
        if not self.is_interior(alpha, beta):
            return None

        rec = HitRecord(p=intersection, t=t, material=self.material, u=alpha, v=beta)
        rec.set_face_normal(r, self.normal)
        return rec

    def bounding_box(self):
        return self.bbox


def make_box(a, b, material):
    """The six outward-facing quads of the box with opposite corners ``a`` and ``b``."""
    sides = HittableList()

    min_pt = Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    max_pt = Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(max_pt.x - min_pt.x, 0.0, 0.0)
    dy = Vec3(0.0, max_pt.y - min_pt.y, 0.0)
    dz = Vec3(0.0, 0.0, max_pt.z - min_pt.z)

    faces = (
        (Vec3(min_pt.x, min_pt.y, max_pt.z), dx, dy),  # front
        (Vec3(max_pt.x, min_pt.y, max_pt.z), -dz, dy),  # right
        (Vec3(max_pt.x, min_pt.y, min_pt.z), -dx, dy),  # back
        (Vec3(min_pt.x, min_pt.y, min_pt.z), dz, dy),  # left
        (Vec3(min_pt.x, max_pt.y, max_pt.z), dx, -dz),  # top
        (Vec3(min_pt.x, min_pt.y, min_pt.z), dx, dz),  # bottom
    )
    for corner, edge_u, edge_v in faces:
        sides.add(Quad(corner, edge_u, edge_v, material))
    return sides