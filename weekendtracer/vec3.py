"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .common import random_double, random_double_range


def _reciprocal(t):
    if t == 0.0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def _format_component(value):
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, t):
        if not isinstance(t, (int, float)):
            return NotImplemented
        return self * _reciprocal(t)

    def __getitem__(self, index):
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError("Index out of bounds for Vec3")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self):
        return " ".join(_format_component(c) for c in self)

    def length_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self):
        return math.sqrt(self.length_squared())

    def unit_vector(self):
        return self / self.length()

    def near_zero(self):
        """True when every component is below 1e-8 in magnitude."""
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    @staticmethod
    def random_in_unit_disk():
        """A random point inside the unit disk in the z = 0 plane."""
        while True:
            p = Vec3(random_double_range(-1.0, 1.0), random_double_range(-1.0, 1.0), 0.0)
            if p.length_squared() < 1.0:
                return p


Point3 = Vec3


def dot(u, v):
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u, v):
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v):
    return v / v.length()


def random():
    """A vector with each component in [0, 1)."""
    return Vec3(random_double(), random_double(), random_double())


def random_range(min_value, max_value):
    """A vector with each component in [min_value, max_value)."""
    return Vec3(
        random_double_range(min_value, max_value),
        random_double_range(min_value, max_value),
        random_double_range(min_value, max_value),
    )


def random_in_unit_sphere():
    while True:
        p = random_range(-1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector():
    return unit_vector(random_in_unit_sphere())


def random_on_hemisphere(normal):
    """A random unit vector on the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v, n):
    return v - 2.0 * dot(v, n) * n


def refract(uv, n, etai_over_etat):
    cos_theta = min(dot(-uv, n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel