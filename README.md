# weekendtracer

weekendtracer is a small Monte Carlo path tracer. It renders scenes made of
the following objects:

- spheres, fixed or moving;
- quads and boxes;
- constant-density volumes;
- instances that are rotated about the y axis or translated.

A bounding volume hierarchy speeds up intersection tests. The available
surfaces are Lambertian, metal, dielectric, diffuse light and isotropic. The
available textures are solid colours, 3D checkers, Perlin noise and image
maps. Images are written as plain-text PPM (P3).

## Installation

```
pip install .
```

Pillow is the only runtime dependency. It is used to load image textures.

## Rendering a built-in scene

The `weekendtracer` command renders one of the built-in scenes. The PPM image
goes to standard output and progress messages go to standard error:

```
weekendtracer > image.ppm
weekendtracer 7 --width 300 --samples 20 > cornell.ppm
```

Arguments:

- `scene`: the scene number. It is optional and defaults to 9.
- `--width N`: override the image width.
- `--samples N`: override the samples per pixel.
- `--depth N`: override the maximum bounce depth.

Each override must be at least 1.

Scenes:

1. bouncing spheres
2. checkered spheres
3. earth
4. Perlin spheres
5. quads
6. simple light
7. Cornell box
8. Cornell box with smoke
9. final scene at 800 pixels wide, 10000 samples, depth 40
10. any other number: the final scene at 400 pixels wide, 250 samples, depth 4

Scenes 3, 9 and any other number outside 1–8 need the image `earthmap.jpg`.
The file is searched for in this order:

1. the directory named by the `RTW_IMAGES` environment variable;
2. the current directory;
3. `images/`, `../images/` and further parent directories, up to six levels up.

If the image cannot be found or read, `FileNotFoundError` is raised.

All rendering runs in pure Python. The full-quality final scene takes a very
long time.

## Using the library

```python
import sys

from weekendtracer.camera import Camera
from weekendtracer.hittable_list import HittableList
from weekendtracer.material import Lambertian
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

world = HittableList()
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian.from_color(Vec3(0.5, 0.5, 0.5))))
world.add(Sphere(Vec3(0, 0, -1), 0.5, Lambertian.from_color(Vec3(0.7, 0.3, 0.3))))

cam = Camera()
cam.image_width = 200
cam.aspect_ratio = 16 / 9
cam.samples_per_pixel = 20
cam.background = Vec3(0.7, 0.8, 1.0)
cam.lookfrom = Vec3(0, 0, 1)
cam.lookat = Vec3(0, 0, -1)

cam.render(world, sys.stdout)
```

- `Camera.render_pixels(world)` returns rows of summed sample colours. It
  writes nothing.
- `Camera.render_tile` renders a single rectangle of pixels.
- `weekendtracer.color.format_color` turns a summed colour into a PPM line.

Each function in `weekendtracer.scenes`, such as `cornell_box()`, returns a
`(world, camera)` pair. `build_scene(scene_id)` returns the pair for a scene
number.

## What it does not do

- The only output format is PPM text. There is no PNG or other image output.
- There is no preview window.
- No scenes can be loaded from files. Scenes are built in Python code.