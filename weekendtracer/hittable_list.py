"""A collection of hittable objects."""

from __future__ import annotations

from .aabb import Aabb
from .hittable import Hittable
from .interval import Interval


class HittableList(Hittable):
    """Objects hit as a group; the closest hit wins.

    An empty list starts with the zero-sized box at the origin; a list built
    from one object starts with the empty box.
    """

    def __init__(self, obj=None):
        if obj is None:
            self.objects = []
            self.bbox = Aabb()
        else:
            self.objects = [obj]
            self.bbox = Aabb.empty()

    def add(self, obj):
        self.objects.append(obj)
        self.bbox = Aabb.from_boxes(self.bbox, obj.bounding_box())

    def clear(self):
        """Remove every object; the bounding box is kept."""
        self.objects.clear()

    def hit(self, r, ray_t):
        closest = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self):
        return self.bbox