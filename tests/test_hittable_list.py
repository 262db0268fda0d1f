import math

import pytest

from weekendtracer.aabb import Aabb
from weekendtracer.hittable import HitRecord, Hittable, Translate
from weekendtracer.hittable_list import HittableList
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Vec3


class _Square(Hittable):
    """The square |x| <= 1, |y| <= 1 in the plane z = 0."""

    def hit(self, r, ray_t):
        if r.direction.z == 0.0:
            return None
        t = -r.origin.z / r.direction.z
        if not ray_t.surrounds(t):
            return None
        p = r.at(t)
        if abs(p.x) > 1.0 or abs(p.y) > 1.0:
            return None
        rec = HitRecord(p=p, t=t)
        rec.set_face_normal(r, Vec3(0.0, 0.0, 1.0))
        return rec

    def bounding_box(self):
        return Aabb.from_points(Vec3(-1.0, -1.0, 0.0), Vec3(1.0, 1.0, 0.0))


def _square_at(z):
    return Translate(_Square(), Vec3(0.0, 0.0, z))


DOWN = Ray(Vec3(0.0, 0.0, 10.0), Vec3(0.0, 0.0, -1.0), 0.0)
ANY = Interval(0.001, math.inf)


def test_empty_list_misses():
    assert HittableList().hit(DOWN, ANY) is None


def test_default_box_is_origin():
    assert HittableList().bounding_box() == Aabb()


def test_single_object_list_starts_empty_box():
    world = HittableList(_square_at(2.0))
    assert world.bounding_box() == Aabb.empty()
    assert len(world.objects) == 1


def test_add_grows_box():
    world = HittableList()
    world.add(_square_at(5.0))
    box = world.bounding_box()
    assert (box.z.min, box.z.max) == (0.0, 5.0)
    assert (box.x.min, box.x.max) == (-1.0, 1.0)


@pytest.mark.parametrize("order", [(2.0, 5.0), (5.0, 2.0)])
def test_closest_hit_wins(order):
    world = HittableList()
    for z in order:
        world.add(_square_at(z))
    rec = world.hit(DOWN, ANY)
    assert rec.t == pytest.approx(5.0)
    assert rec.p.z == pytest.approx(5.0)


def test_interval_limits_hits():
    world = HittableList()
    world.add(_square_at(2.0))
    world.add(_square_at(5.0))
    assert world.hit(DOWN, Interval(0.001, 6.0)).t == pytest.approx(5.0)
    assert world.hit(DOWN, Interval(6.0, 9.0)).t == pytest.approx(8.0)
    assert world.hit(DOWN, Interval(0.001, 4.0)) is None


def test_clear_removes_objects_keeps_box():
    world = HittableList()
    world.add(_square_at(5.0))
    box = world.bounding_box()
    world.clear()
    assert world.objects == []
    assert world.hit(DOWN, ANY) is None
    assert world.bounding_box() == box


def test_nested_lists():
    inner = HittableList()
    inner.add(_square_at(3.0))
    outer = HittableList()
    outer.add(inner)
    outer.add(_square_at(1.0))
    assert outer.hit(DOWN, ANY).p.z == pytest.approx(3.0)