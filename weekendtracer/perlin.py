"""Perlin gradient noise."""

from __future__ import annotations

import math

from .common import random_int_range
from .vec3 import Vec3, dot, random_unit_vector


class Perlin:
    """Gradient noise over 3D space with a period of 256 on each axis."""

    POINT_COUNT = 256

    def __init__(self):
        self.randvec = [random_unit_vector() for _ in range(self.POINT_COUNT)]
        self.perm_x = self._generate_perm()
        self.perm_y = self._generate_perm()
        self.perm_z = self._generate_perm()

    def noise(self, p):
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)
        corners = [
            [
                [
                    self.randvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
                    for dk in range(2)
                ]
                for dj in range(2)
            ]
            for di in range(2)
        ]
        return self._perlin_interp(corners, u, v, w)

    @staticmethod
    def _perlin_interp(corners, u, v, w):
        uu = u * u * (3.0 - 2.0 * u)
        vv = v * v * (3.0 - 2.0 * v)
        ww = w * w * (3.0 - 2.0 * w)
        accum = 0.0
        for i, plane in enumerate(corners):
            u_weight = i * uu + (1 - i) * (1.0 - uu)
            for j, row in enumerate(plane):
                v_weight = j * vv + (1 - j) * (1.0 - vv)
                for k, gradient in enumerate(row):
                    w_weight = k * ww + (1 - k) * (1.0 - ww)
                    weight_v = Vec3(uu - i, vv - j, ww - k)
                    accum += u_weight * v_weight * w_weight * dot(gradient, weight_v)
        return accum

    @classmethod
    def _generate_perm(cls):
        perm = list(range(cls.POINT_COUNT))
        for i in range(cls.POINT_COUNT - 1, 0, -1):
            target = random_int_range(0, i)
            perm[i], perm[target] = perm[target], perm[i]
        return perm

    def turb(self, p, depth=7):
        """Absolute value of ``depth`` octaves of noise summed together."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)