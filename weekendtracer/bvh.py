"""Bounding volume hierarchy over hittable objects."""

from __future__ import annotations

from .aabb import Aabb
from .common import random_int_range
from .hittable import Hittable
from .interval import Interval


class BvhNode(Hittable):
    """A binary tree of bounding boxes, split along a random axis at each level."""

    def __init__(self, objects):
        objects = list(objects)
        if not objects:
            raise ValueError("cannot build a BVH from no objects")

        axis = random_int_range(0, 2)

        def key(obj):
            return obj.bounding_box().axis_interval(axis).min

        if len(objects) == 1:
            left = right = objects[0]
        elif len(objects) == 2:
            first, second = objects
            left, right = (first, second) if key(first) < key(second) else (second, first)
        else:
            objects.sort(key=key)
            mid = len(objects) // 2
            left = BvhNode(objects[:mid])
            right = BvhNode(objects[mid:])

        self.left = left
        self.right = right
        self.bbox = Aabb.from_boxes(left.bounding_box(), right.bounding_box())

    def hit(self, r, ray_t):
        if not self.bbox.hit(r, ray_t):
            return None
        left_rec = self.left.hit(r, ray_t)
        upper = left_rec.t if left_rec is not None else ray_t.max
        right_rec = self.right.hit(r, Interval(ray_t.min, upper))
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self):
        return self.bbox