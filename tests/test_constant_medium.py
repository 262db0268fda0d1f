import math
from unittest.mock import patch

import pytest

from weekendtracer.constant_medium import ConstantMedium
from weekendtracer.interval import Interval
from weekendtracer.material import Isotropic, Material
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

WIDE = Interval(0.001, math.inf)
COLOR = Vec3(0.2, 0.4, 0.9)


@pytest.fixture
def boundary():
    return Sphere(Vec3(0.0, 0.0, -5.0), 1.0, Material())


def test_miss_returns_none(boundary):
    medium = ConstantMedium.from_color(boundary, 1.0, COLOR)
    assert medium.hit(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)), WIDE) is None


def test_dense_medium_hits_at_entry(boundary):
    medium = ConstantMedium.from_color(boundary, 1e12, COLOR)
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    entry = boundary.hit(r, Interval.UNIVERSE)
    rec = medium.hit(r, WIDE)
    assert rec.t == pytest.approx(entry.t, abs=1e-6)
    assert rec.p == r.at(rec.t)


def test_record_fields(boundary):
    medium = ConstantMedium.from_color(boundary, 1e12, COLOR)
    rec = medium.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0)), WIDE)
    assert rec.front_face is True
    assert rec.normal == Vec3(1.0, 0.0, 0.0)
    assert isinstance(rec.material, Isotropic)


def test_phase_function_uses_color(boundary):
    medium = ConstantMedium.from_color(boundary, 1e12, COLOR)
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    rec = medium.hit(r, WIDE)
    assert rec.material.scatter(r, rec).attenuation == COLOR


def test_hit_stays_inside_boundary(boundary):
    medium = ConstantMedium.from_color(boundary, 0.5, COLOR)
    r = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    entry = boundary.hit(r, Interval.UNIVERSE).t
    exit_ = boundary.hit(r, Interval(entry + 0.0001, math.inf)).t
    for _ in range(50):
        rec = medium.hit(r, WIDE)
        if rec is not None:
            assert entry <= rec.t <= exit_


def test_thin_medium_misses(boundary):
    medium = ConstantMedium.from_color(boundary, 1e-30, COLOR)
    assert medium.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0)), WIDE) is None


def test_zero_random_sample_misses(boundary):
    medium = ConstantMedium.from_color(boundary, 1.0, COLOR)
    with patch("random.random", return_value=0.0):
        assert medium.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0)), WIDE) is None


def test_interval_before_entry_misses(boundary):
    medium = ConstantMedium.from_color(boundary, 1e12, COLOR)
    assert medium.hit(Ray(Vec3(), Vec3(0.0, 0.0, -1.0)), Interval(0.001, 3.0)) is None


def test_ray_starting_inside_clamps_to_zero(boundary):
    medium = ConstantMedium.from_color(boundary, 1e12, COLOR)
    r = Ray(Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, -1.0))
    rec = medium.hit(r, Interval(-10.0, math.inf))
    assert 0.0 <= rec.t < 1e-3


def test_bounding_box_is_boundary_box(boundary):
    medium = ConstantMedium.from_color(boundary, 1.0, COLOR)
    assert medium.bounding_box() == boundary.bounding_box()