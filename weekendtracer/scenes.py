"""Example scenes and the command that renders them."""

from __future__ import annotations

import argparse
import sys

from .bvh import BvhNode
from .camera import Camera
from .common import random_double, random_double_range
from .constant_medium import ConstantMedium
from .hittable import RotateY, Translate
from .hittable_list import HittableList
from .material import Dielectric, DiffuseLight, Lambertian, Metal
from .quad import Quad, make_box
from .sphere import Sphere
from .texture import CheckerTexture, ImageTexture, NoiseTexture
from .vec3 import Vec3, random as random_vec3, random_range

DEFAULT_SCENE = 9
_SKY = Vec3(0.70, 0.80, 1.00)
_BLACK = Vec3(0.0, 0.0, 0.0)


def _camera(**settings):
    """A camera with the settings every scene shares, overridden by ``settings``."""
    base = {
        "image_width": 1200,
        "aspect_ratio": 16.0 / 9.0,
        "samples_per_pixel": 100,
        "max_depth": 50,
        "background": _SKY,
        "vfov": 20.0,
        "lookfrom": Vec3(13.0, 2.0, 3.0),
        "lookat": Vec3(0.0, 0.0, 0.0),
        "vup": Vec3(0.0, 1.0, 0.0),
        "defocus_angle": 0.0,
    }
    base.update(settings)
    return Camera(**base)


def bouncing_spheres():
    """A checkered ground covered in random small spheres and three large ones."""
    world = HittableList()
    checker = CheckerTexture.from_colors(0.32, Vec3(0.2, 0.3, 0.1), Vec3(0.5, 0.5, 0.5))
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Vec3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Vec3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_vec3() * random_vec3()
                center2 = center + Vec3(0.0, random_double_range(0.0, 0.5), 0.0)
                world.add(Sphere.moving(center, center2, 0.2, Lambertian.from_color(albedo)))
            elif choose_mat < 0.95:
                albedo = random_range(0.5, 1.0)
                fuzz = random_double_range(0.0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.50)))

    world.add(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.50)))
    world.add(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian.from_color(Vec3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))

    cam = _camera(defocus_angle=0.6, focus_dist=10.0)
    return BvhNode(world.objects), cam


def checkered_spheres():
    """Two large spheres sharing a checker texture."""
    world = HittableList()
    checker = CheckerTexture.from_colors(0.32, Vec3(0.2, 0.3, 0.1), Vec3(0.9, 0.9, 0.9))
    world.add(Sphere(Vec3(0.0, -10.0, 0.0), 10.0, Lambertian(checker)))
    world.add(Sphere(Vec3(0.0, 10.0, 0.0), 10.0, Lambertian(checker)))
    return world, _camera()


def earth():
    """A globe textured with ``earthmap.jpg``; raises FileNotFoundError if it is missing."""
    earth_texture = ImageTexture.from_file("earthmap.jpg")
    globe = Sphere(Vec3(0.0, 0.0, 0.0), 2.0, Lambertian(earth_texture))
    cam = _camera(lookfrom=Vec3(0.0, 0.0, 12.0))
    return HittableList(globe), cam


def perlin_spheres():
    """Two spheres with a Perlin marble texture."""
    world = HittableList()
    pertext = NoiseTexture(4.0)
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(pertext)))
    world.add(Sphere(Vec3(0.0, 2.0, 0.0), 2.0, Lambertian(pertext)))
    return world, _camera()


def quads():
    """Five coloured quads arranged around the view axis."""
    world = HittableList()
    left_red = Lambertian.from_color(Vec3(1.0, 0.2, 0.2))
    back_green = Lambertian.from_color(Vec3(0.2, 1.0, 0.2))
    right_blue = Lambertian.from_color(Vec3(0.2, 0.2, 1.0))
    upper_orange = Lambertian.from_color(Vec3(1.0, 0.5, 0.0))
    lower_teal = Lambertian.from_color(Vec3(0.2, 0.8, 0.8))

    world.add(Quad(Vec3(-3.0, -2.0, 5.0), Vec3(0.0, 0.0, -4.0), Vec3(0.0, 4.0, 0.0), left_red))
    world.add(Quad(Vec3(-2.0, -2.0, 0.0), Vec3(4.0, 0.0, 0.0), Vec3(0.0, 4.0, 0.0), back_green))
    world.add(Quad(Vec3(3.0, -2.0, 1.0), Vec3(0.0, 0.0, 4.0), Vec3(0.0, 4.0, 0.0), right_blue))
    world.add(Quad(Vec3(-2.0, 3.0, 1.0), Vec3(4.0, 0.0, 0.0), Vec3(0.0, 0.0, 4.0), upper_orange))
    world.add(Quad(Vec3(-2.0, -3.0, 5.0), Vec3(4.0, 0.0, 0.0), Vec3(0.0, 0.0, -4.0), lower_teal))

    cam = _camera(aspect_ratio=1.0, vfov=80.0, lookfrom=Vec3(0.0, 0.0, 9.0))
    return world, cam


def simple_light():
    """Perlin spheres lit by a quad light and a spherical light."""
    world = HittableList()
    pertext = NoiseTexture(4.0)
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(pertext)))
    world.add(Sphere(Vec3(0.0, 2.0, 0.0), 2.0, Lambertian(pertext)))

    difflight = DiffuseLight.from_color(Vec3(4.0, 4.0, 4.0))
    world.add(Quad(Vec3(3.0, 1.0, -2.0), Vec3(2.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0), difflight))
    world.add(Sphere(Vec3(0.0, 7.0, 0.0), 2.0, difflight))

    cam = _camera(
        background=_BLACK,
        lookfrom=Vec3(26.0, 3.0, 6.0),
        lookat=Vec3(0.0, 2.0, 0.0),
    )
    return world, cam


def _cornell_camera(image_width):
    return _camera(
        aspect_ratio=1.0,
        image_width=image_width,
        samples_per_pixel=200,
        background=_BLACK,
        vfov=40.0,
        lookfrom=Vec3(278.0, 278.0, -800.0),
        lookat=Vec3(278.0, 278.0, 0.0),
    )


def cornell_box():
    """The Cornell box with two rotated blocks."""
    world = HittableList()
    red = Lambertian.from_color(Vec3(0.65, 0.05, 0.05))
    white = Lambertian.from_color(Vec3(0.73, 0.73, 0.73))
    green = Lambertian.from_color(Vec3(0.12, 0.45, 0.15))
    light = DiffuseLight.from_color(Vec3(15.0, 15.0, 15.0))

    world.add(Quad(Vec3(555.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), Vec3(0.0, 0.0, 555.0), green))
    world.add(Quad(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), Vec3(0.0, 0.0, 555.0), red))
    world.add(
        Quad(Vec3(343.0, 554.0, 332.0), Vec3(-130.0, 0.0, 0.0), Vec3(0.0, 0.0, -105.0), light)
    )
    world.add(Quad(Vec3(0.0, 0.0, 0.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 0.0, 555.0), white))
    world.add(
        Quad(Vec3(555.0, 555.0, 555.0), Vec3(-555.0, 0.0, 0.0), Vec3(0.0, 0.0, -555.0), white)
    )
    world.add(Quad(Vec3(0.0, 0.0, 555.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), white))

    box1 = make_box(Vec3(0.0, 0.0, 0.0), Vec3(165.0, 330.0, 165.0), white)
    world.add(Translate(RotateY(box1, 15.0), Vec3(265.0, 0.0, 295.0)))

    box2 = make_box(Vec3(0.0, 0.0, 0.0), Vec3(165.0, 165.0, 165.0), white)
    world.add(Translate(RotateY(box2, 18.0), Vec3(130.0, 0.0, 65.0)))

    return world, _cornell_camera(1200)


def cornell_smoke():
    """The Cornell box with its blocks replaced by dark and light smoke."""
    world = HittableList()
    red = Lambertian.from_color(Vec3(0.65, 0.05, 0.05))
    white = Lambertian.from_color(Vec3(0.73, 0.73, 0.73))
    green = Lambertian.from_color(Vec3(0.12, 0.45, 0.15))
    light = DiffuseLight.from_color(Vec3(7.0, 7.0, 7.0))

    world.add(Quad(Vec3(555.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), Vec3(0.0, 0.0, 555.0), green))
    world.add(Quad(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), Vec3(0.0, 0.0, 555.0), red))
    world.add(
        Quad(Vec3(113.0, 554.0, 127.0), Vec3(330.0, 0.0, 0.0), Vec3(0.0, 0.0, 305.0), light)
    )
    world.add(Quad(Vec3(0.0, 555.0, 0.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 0.0, 555.0), white))
    world.add(Quad(Vec3(0.0, 0.0, 0.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 0.0, 555.0), white))
    world.add(Quad(Vec3(0.0, 0.0, 555.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), white))

    box1 = make_box(Vec3(0.0, 0.0, 0.0), Vec3(165.0, 330.0, 165.0), white)
    box1 = Translate(RotateY(box1, 15.0), Vec3(265.0, 0.0, 295.0))

    box2 = make_box(Vec3(0.0, 0.0, 0.0), Vec3(165.0, 165.0, 165.0), white)
    box2 = Translate(RotateY(box2, -18.0), Vec3(130.0, 0.0, 65.0))

    world.add(ConstantMedium.from_color(box1, 0.01, Vec3(0.0, 0.0, 0.0)))
    world.add(ConstantMedium.from_color(box2, 0.01, Vec3(1.0, 1.0, 1.0)))

    return world, _cornell_camera(600)


def final_scene(image_width, samples_per_pixel, max_depth):
    """The scene combining every feature; needs ``earthmap.jpg``."""
    boxes1 = HittableList()
    ground = Lambertian.from_color(Vec3(0.48, 0.83, 0.53))
    boxes_per_side = 20
    w = 100.0
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = random_double_range(1.0, 101.0)
            boxes1.add(make_box(Vec3(x0, 0.0, z0), Vec3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BvhNode(boxes1.objects))

    light = DiffuseLight.from_color(Vec3(7.0, 7.0, 7.0))
    world.add(Quad(Vec3(123.0, 554.0, 147.0), Vec3(300.0, 0.0, 0.0), Vec3(0.0, 0.0, 265.0), light))

    center1 = Vec3(400.0, 400.0, 200.0)
    center2 = center1 + Vec3(30.0, 0.0, 0.0)
    world.add(
        Sphere.moving(center1, center2, 50.0, Lambertian.from_color(Vec3(0.7, 0.3, 0.1)))
    )

    world.add(Sphere(Vec3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5)))
    world.add(Sphere(Vec3(0.0, 150.0, 145.0), 50.0, Metal(Vec3(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Vec3(360.0, 150.0, 145.0), 70.0, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium.from_color(boundary, 0.2, Vec3(0.2, 0.4, 0.9)))

    fog_boundary = Sphere(Vec3(0.0, 0.0, 0.0), 5000.0, Dielectric(1.5))
    world.add(ConstantMedium.from_color(fog_boundary, 0.0001, Vec3(1.0, 1.0, 1.0)))

    earth_texture = ImageTexture.from_file("earthmap.jpg")
    world.add(Sphere(Vec3(400.0, 200.0, 400.0), 100.0, Lambertian(earth_texture)))

    pertext = NoiseTexture(0.2)
    world.add(Sphere(Vec3(220.0, 280.0, 300.0), 80.0, Lambertian(pertext)))

    boxes2 = HittableList()
    white = Lambertian.from_color(Vec3(0.73, 0.73, 0.73))
    for _ in range(1000):
        boxes2.add(Sphere(random_range(0.0, 165.0), 10.0, white))

    world.add(
        Translate(RotateY(BvhNode(boxes2.objects), 15.0), Vec3(-100.0, 270.0, 395.0))
    )

    cam = _camera(
        aspect_ratio=1.0,
        image_width=image_width,
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
        background=_BLACK,
        vfov=40.0,
        lookfrom=Vec3(478.0, 278.0, -600.0),
        lookat=Vec3(278.0, 278.0, 0.0),
    )
    return world, cam


_SCENES = {
    1: bouncing_spheres,
    2: checkered_spheres,
    3: earth,
    4: perlin_spheres,
    5: quads,
    6: simple_light,
    7: cornell_box,
    8: cornell_smoke,
    9: lambda: final_scene(800, 10000, 40),
}


def build_scene(scene_id):
    """The (world, camera) pair for ``scene_id``; unknown ids give a small final scene."""
    builder = _SCENES.get(scene_id)
    if builder is None:
        return final_scene(400, 250, 4)
    return builder()


def main(argv=None):
    """Render a scene as PPM text on standard output."""
    parser = argparse.ArgumentParser(
        prog="weekendtracer", description="Render an example scene to PPM on stdout."
    )
    parser.add_argument(
        "scene", type=int, nargs="?", default=DEFAULT_SCENE, help="scene number (1-9)"
    )
    parser.add_argument("--width", type=int, help="override the image width")
    parser.add_argument("--samples", type=int, help="override the samples per pixel")
    parser.add_argument("--depth", type=int, help="override the maximum bounce depth")
    args = parser.parse_args(argv)

    for name, value in (("width", args.width), ("samples", args.samples), ("depth", args.depth)):
        if value is not None and value < 1:
            parser.error(f"--{name} must be at least 1")

    world, cam = build_scene(args.scene)
    if args.width is not None:
        cam.image_width = args.width
    if args.samples is not None:
        cam.samples_per_pixel = args.samples
    if args.depth is not None:
        cam.max_depth = args.depth

    cam.render(world, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())