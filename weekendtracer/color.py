"""Conversion of accumulated colours to PPM text."""

from __future__ import annotations

import math

from .interval import Interval

INTENSITY = Interval(0.0, 0.999)


def linear_to_gamma(linear_component):
    """Gamma-2 transform; non-positive values map to 0."""
    if linear_component > 0.0:
        return math.sqrt(linear_component)
    return 0.0


def format_color(pixel_color, samples_per_pixel):
    """The PPM line "r g b\\n" for a colour summed over ``samples_per_pixel`` samples."""
    scale = 1.0 / samples_per_pixel
    components = (
        int(256.0 * INTENSITY.clamp(linear_to_gamma(scale * c))) for c in pixel_color
    )
    return " ".join(str(c) for c in components) + "\n"


def write_color(out, pixel_color, samples_per_pixel):
    """Write the PPM line for ``pixel_color`` to the text stream ``out``."""
    out.write(format_color(pixel_color, samples_per_pixel))