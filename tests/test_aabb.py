import math

from weekendtracer.aabb import Aabb
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Vec3


def unit_box():
    return Aabb.from_points(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))


def test_from_points_orders_corners():
    box = Aabb.from_points(Vec3(1.0, 0.0, 5.0), Vec3(0.0, 2.0, -1.0))
    assert box.x == Interval(0.0, 1.0)
    assert box.y == Interval(0.0, 2.0)
    assert box.z == Interval(-1.0, 5.0)


def test_from_points_is_symmetric():
    a = Vec3(3.0, -1.0, 2.0)
    b = Vec3(-2.0, 4.0, 0.5)
    assert Aabb.from_points(a, b) == Aabb.from_points(b, a)


def test_from_boxes_encloses_both():
    a = unit_box()
    b = Aabb.from_points(Vec3(2.0, -1.0, 0.5), Vec3(3.0, 0.5, 0.7))
    u = Aabb.from_boxes(a, b)
    assert u.x == Interval(0.0, 3.0)
    assert u.y == Interval(-1.0, 1.0)
    assert u.z == Interval(0.0, 1.0)


def test_empty_is_identity_for_union():
    box = unit_box()
    assert Aabb.from_boxes(Aabb.empty(), box) == box


def test_axis_interval_falls_back_to_x():
    box = Aabb.from_points(Vec3(0.0, 1.0, 2.0), Vec3(10.0, 11.0, 12.0))
    assert box.axis_interval(0) == box.x
    assert box.axis_interval(1) == box.y
    assert box.axis_interval(2) == box.z
    assert box.axis_interval(7) == box.x


def test_add_offset():
    moved = unit_box() + Vec3(1.0, 2.0, 3.0)
    assert moved == Aabb.from_points(Vec3(1.0, 2.0, 3.0), Vec3(2.0, 3.0, 4.0))


def test_pad_widens_only_thin_axes():
    flat = Aabb.from_points(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 1.0))
    padded = flat.pad()
    assert padded.x == flat.x
    assert padded.z == flat.z
    assert math.isclose(padded.y.size(), 0.0001)
    assert padded.y.contains(0.0)


def test_hit_ray_through_box():
    r = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert unit_box().hit(r, Interval(0.001, math.inf))


def test_miss_ray_beside_box():
    r = Ray(Vec3(2.0, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert not unit_box().hit(r, Interval(0.001, math.inf))


def test_hit_respects_interval():
    r = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert not unit_box().hit(r, Interval(0.0, 1.0))


def test_ray_pointing_away_misses():
    r = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, -1.0))
    assert not unit_box().hit(r, Interval(0.001, math.inf))