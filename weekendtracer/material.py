"""Surface materials that scatter or emit light."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .common import random_double
from .ray import Ray
from .texture import SolidColor
from .vec3 import (
    Vec3,
    dot,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


@dataclass(frozen=True)
class Scatter:
    """A scattered ray and the attenuation applied to the light it carries."""

    attenuation: Vec3
    scattered: Ray


class Material:
    """Base material: absorbs everything and emits nothing."""

    def scatter(self, r_in, rec):
        """The scattered ray for a hit, or None if the ray is absorbed."""
        return None

    def emitted(self, u, v, p):
        return Vec3()


class Lambertian(Material):
    """Ideal diffuse reflection."""

    def __init__(self, texture=None):
        self.texture = texture if texture is not None else SolidColor(Vec3())

    @classmethod
    def from_color(cls, color):
        return cls(SolidColor(color))

    def scatter(self, r_in, rec):
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Scatter(
            self.texture.value(rec.u, rec.v, rec.p),
            Ray(rec.p, direction, r_in.time),
        )


class Metal(Material):
    """Mirror reflection blurred by ``fuzz`` (capped at 1)."""

    def __init__(self, albedo, fuzz):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, r_in, rec):
        reflected = unit_vector(reflect(r_in.direction, rec.normal))
        reflected = reflected + self.fuzz * random_in_unit_sphere()
        scattered = Ray(rec.p, reflected, r_in.time)
        if dot(scattered.direction, rec.normal) > 0.0:
            return Scatter(self.albedo, scattered)
        return None


class Dielectric(Material):
    """Clear refracting material such as glass."""

    def __init__(self, refraction_index):
        self.refraction_index = refraction_index

    @staticmethod
    def reflectance(cosine, refraction_index):
        """Schlick's approximation of reflectance."""
        r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
        r0 = r0 * r0
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5

    def scatter(self, r_in, rec):
        ratio = 1.0 / self.refraction_index if rec.front_face else self.refraction_index
        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ratio) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)
        return Scatter(Vec3(1.0, 1.0, 1.0), Ray(rec.p, direction, r_in.time))


class DiffuseLight(Material):
    """A light source that emits its texture and scatters nothing."""

    def __init__(self, texture):
        self.texture = texture

    @classmethod
    def from_color(cls, color):
        return cls(SolidColor(color))

    def scatter(self, r_in, rec):
        return None

    def emitted(self, u, v, p):
        return self.texture.value(u, v, p)


class Isotropic(Material):
    """Scatters uniformly in every direction; used inside participating media."""

    def __init__(self, texture):
        self.texture = texture

    @classmethod
    def from_color(cls, albedo):
        return cls(SolidColor(albedo))

    def scatter(self, r_in, rec):
        return Scatter(
            self.texture.value(rec.u, rec.v, rec.p),
            Ray(rec.p, random_unit_vector(), r_in.time),
        )