"""A positionable thin-lens camera that renders a world to PPM text."""

from __future__ import annotations

import math
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .common import INFINITY, degrees_to_radians, random_double
from .color import write_color
from .interval import Interval
from .ray import Ray
from .vec3 import Vec3, cross, unit_vector

HEIGHT_PARTITION = 20
WIDTH_PARTITION = 20
THREAD_LIMIT = 16


@dataclass
class Camera:
    """Camera settings plus the view geometry derived from them by :meth:`initialize`."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    image_height: int = 0
    samples_per_pixel: int = 10
    max_depth: int = 10
    background: Vec3 = field(default_factory=Vec3)
    vfov: float = 90.0
    lookfrom: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    lookat: Vec3 = field(default_factory=Vec3)
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    center: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    pixel00_loc: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    pixel_delta_u: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    pixel_delta_v: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    u: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    v: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    w: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    defocus_disk_u: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    defocus_disk_v: Vec3 = field(default_factory=Vec3, init=False, repr=False)

    def initialize(self):
        """Compute the image height and the viewport geometry from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        self.center = self.lookfrom
        self.w = unit_vector(self.lookfrom - self.lookat)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - self.focus_dist * self.w - viewport_u / 2.0 - viewport_v / 2.0
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (
            self.pixel_delta_u + self.pixel_delta_v
        )

        defocus_radius = self.focus_dist * math.tan(
            degrees_to_radians(self.defocus_angle / 2.0)
        )
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def _pixel_sample_square(self):
        px = -0.5 + random_double()
        py = -0.5 + random_double()
        return px * self.pixel_delta_u + py * self.pixel_delta_v

    def _defocus_disk_sample(self):
        p = Vec3.random_in_unit_disk()
        return self.center + p.x * self.defocus_disk_u + p.y * self.defocus_disk_v

    def get_ray(self, i, j):
        """A randomly jittered ray through pixel (i, j) at a random time."""
        pixel_center = self.pixel00_loc + i * self.pixel_delta_u + j * self.pixel_delta_v
        pixel_sample = pixel_center + self._pixel_sample_square()
        if self.defocus_angle <= 0.0:
            ray_origin = self.center
        else:
            ray_origin = self._defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin, random_double())

    def ray_color(self, r, depth, world):
        """The light arriving along ``r`` after at most ``depth`` bounces."""
        if depth <= 0:
            return Vec3(0.0, 0.0, 0.0)
        rec = world.hit(r, Interval(0.001, INFINITY))
        if rec is None:
            return self.background

        emitted = rec.material.emitted(rec.u, rec.v, rec.p)
        scatter = rec.material.scatter(r, rec)
        if scatter is None:
            return emitted
        return emitted + scatter.attenuation * self.ray_color(
            scatter.scattered, depth - 1, world
        )

    def render_tile(self, world, x_min, x_max, y_min, y_max):
        """Summed sample colours for the pixels in [x_min, x_max) x [y_min, y_max).

        The bounds are clipped to the image; rows are returned top to bottom.
        """
        x_max = min(x_max, self.image_width)
        y_max = min(y_max, self.image_height)
        rows = []
        for j in range(y_min, y_max):
            row = []
            for i in range(x_min, x_max):
                pixel_color = Vec3()
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                row.append(pixel_color)
            rows.append(row)
        return rows

    def render_pixels(self, world):
        """Render the whole image in tiles on a thread pool; returns rows of summed colours."""
        self.initialize()
        width, height = self.image_width, self.image_height
        chunk_height = -(-height // HEIGHT_PARTITION)
        chunk_width = -(-width // WIDTH_PARTITION)

        tiles = [
            (i * chunk_width, (i + 1) * chunk_width, j * chunk_height, (j + 1) * chunk_height)
            for j in range(HEIGHT_PARTITION)
            for i in range(WIDTH_PARTITION)
        ]

        lock = threading.Lock()
        done = 0

        def run(bounds):
            nonlocal done
            buffer = self.render_tile(world, *bounds)
            with lock:
                done += 1
                remaining = max(0, height - done)
                sys.stderr.write(f"\rScanlines remaining: {remaining}")
                sys.stderr.flush()
            return bounds, buffer

        image = [[Vec3() for _ in range(width)] for _ in range(height)]
        with ThreadPoolExecutor(max_workers=THREAD_LIMIT) as pool:
            for (x_min, _, y_min, _), buffer in pool.map(run, tiles):
                for dy, row in enumerate(buffer):
                    image[y_min + dy][x_min : x_min + len(row)] = row
        return image

    def render(self, world, out=None):
        """Render ``world`` and write it as plain PPM (P3) text to ``out`` (stdout by default)."""
        if out is None:
            out = sys.stdout
        image = self.render_pixels(world)
        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")
        for j, row in enumerate(image):
            sys.stderr.write(f"\rScanlines remaining: {self.image_height - j}\n")
            for pixel_color in row:
                write_color(out, pixel_color, self.samples_per_pixel)
        sys.stderr.write("\nDone.\n")