"""Textures giving a colour for surface coordinates and a point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .perlin import Perlin
from .rtw_image import RtwImage
from .vec3 import Vec3


class Texture(ABC):
    """A colour that varies over a surface."""

    @abstractmethod
    def value(self, u, v, p):
        """The colour at surface coordinates (u, v) and point ``p``."""


class SolidColor(Texture):
    """A single constant colour."""

    def __init__(self, color):
        self.color = color

    @classmethod
    def from_rgb(cls, r, g, b):
        return cls(Vec3(r, g, b))

    def value(self, u, v, p):
        return self.color


class CheckerTexture(Texture):
    """A 3D checkerboard alternating between two textures."""

    def __init__(self, scale, even, odd):
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, scale, c1, c2):
        return cls(scale, SolidColor(c1), SolidColor(c2))

    def value(self, u, v, p):
        x_int = math.floor(self.inv_scale * p.x)
        y_int = math.floor(self.inv_scale * p.y)
        z_int = math.floor(self.inv_scale * p.z)
        if (x_int + y_int + z_int) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


class ImageTexture(Texture):
    """A texture looked up from an image by (u, v)."""

    def __init__(self, image):
        self.image = image

    @classmethod
    def from_file(cls, filename):
        """Load the image ``filename``; raises FileNotFoundError if it cannot be read."""
        return cls(RtwImage.load(filename))

    def value(self, u, v, p):
        image = self.image
        if image.height <= 0:
            return Vec3(0.0, 1.0, 1.0)
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)
        i = min(int(u * image.width), image.width - 1)
        j = min(int(v * image.height), image.height - 1)
        r, g, b = image.pixel_data(i, j)
        color_scale = 1.0 / 255.0
        return Vec3(color_scale * r, color_scale * g, color_scale * b)


class NoiseTexture(Texture):
    """A marble-like pattern driven by Perlin turbulence."""

    def __init__(self, scale):
        self.noise = Perlin()
        self.scale = scale

    def value(self, u, v, p):
        return Vec3(0.5, 0.5, 0.5) * (
            1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p, 7))
        )