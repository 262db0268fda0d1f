import math

import pytest

from weekendtracer.aabb import Aabb
from weekendtracer.interval import Interval
from weekendtracer.material import Material
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere, get_sphere_uv
from weekendtracer.vec3 import Vec3, dot

CENTER = Vec3(0.0, 0.0, -2.0)
RADIUS = 1.0
WIDE = Interval(0.001, math.inf)


@pytest.fixture
def material():
    return Material()


@pytest.fixture
def sphere(material):
    return Sphere(CENTER, RADIUS, material)


def test_hit_point_lies_on_surface(sphere):
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    rec = sphere.hit(r, WIDE)
    assert rec is not None
    assert (rec.p - CENTER).length() == pytest.approx(RADIUS)
    assert rec.p == r.at(rec.t)


def test_hit_from_outside_faces_ray(sphere):
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    rec = sphere.hit(r, WIDE)
    assert rec.front_face is True
    assert dot(rec.normal, r.direction) < 0.0
    assert rec.normal.length() == pytest.approx(1.0)


def test_hit_from_inside_is_back_face(sphere):
    r = Ray(CENTER, Vec3(0.0, 1.0, 0.0))
    rec = sphere.hit(r, WIDE)
    assert rec.front_face is False
    assert dot(rec.normal, r.direction) < 0.0
    assert rec.t == pytest.approx(RADIUS)


def test_closest_root_is_chosen(sphere):
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    near = sphere.hit(r, WIDE)
    far = sphere.hit(r, Interval(near.t + 0.01, math.inf))
    assert far.t > near.t
    assert (far.p - CENTER).length() == pytest.approx(RADIUS)


def test_miss_returns_none(sphere):
    assert sphere.hit(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)), WIDE) is None


def test_interval_excludes_hit(sphere):
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    assert sphere.hit(r, Interval(0.001, 0.5)) is None


def test_zero_direction_is_a_miss(sphere):
    assert sphere.hit(Ray(Vec3(), Vec3()), WIDE) is None


def test_record_carries_material(sphere, material):
    rec = sphere.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0)), WIDE)
    assert rec.material is material


def test_uv_in_unit_square(sphere):
    rec = sphere.hit(Ray(Vec3(0.3, 0.2, 0.0), Vec3(0.0, 0.0, -1.0)), WIDE)
    assert 0.0 <= rec.u <= 1.0
    assert 0.0 <= rec.v <= 1.0


def test_static_bounding_box(sphere):
    rvec = Vec3(RADIUS, RADIUS, RADIUS)
    assert sphere.bounding_box() == Aabb.from_points(CENTER - rvec, CENTER + rvec)


def test_moving_center_endpoints(material):
    c2 = Vec3(1.0, 2.0, -2.0)
    s = Sphere.moving(CENTER, c2, RADIUS, material)
    assert s.center(0.0) == CENTER
    assert s.center(1.0) == c2


def test_static_center_ignores_time(sphere):
    assert sphere.center(0.7) == CENTER


def test_moving_bounding_box_encloses_both(material):
    c2 = Vec3(3.0, 0.0, -2.0)
    s = Sphere.moving(CENTER, c2, RADIUS, material)
    box = s.bounding_box()
    assert box.x.min == CENTER.x - RADIUS
    assert box.x.max == c2.x + RADIUS
    assert box.z.min == CENTER.z - RADIUS


def test_moving_sphere_hit_depends_on_time(material):
    c2 = Vec3(10.0, 0.0, -2.0)
    s = Sphere.moving(CENTER, c2, RADIUS, material)
    assert s.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0), 0.0), WIDE) is not None
    assert s.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0), 1.0), WIDE) is None


def test_sphere_uv_on_positive_x():
    assert get_sphere_uv(Vec3(1.0, 0.0, 0.0)) == pytest.approx((0.5, 0.5))


def test_sphere_uv_poles_order():
    _, v_bottom = get_sphere_uv(Vec3(0.0, -1.0, 0.0))
    _, v_top = get_sphere_uv(Vec3(0.0, 1.0, 0.0))
    assert v_bottom < v_top


def test_sphere_uv_tolerates_rounding_past_pole():
    u, v = get_sphere_uv(Vec3(0.0, 1.0 + 1e-12, 0.0))
    assert v == pytest.approx(get_sphere_uv(Vec3(0.0, 1.0, 0.0))[1])