"""Shared constants and random-number helpers."""

import math
import random

INFINITY = math.inf
PI = math.pi


def degrees_to_radians(degrees):
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double():
    """Return a random float in [0, 1)."""
    return random.random()


def random_double_range(min_value, max_value):
    """Return a random float in [min_value, max_value)."""
    return min_value + (max_value - min_value) * random_double()


def random_int_range(min_value, max_value):
    """Return a random integer in [min_value, max_value], both ends included."""
    return int(random_double_range(float(min_value), float(max_value + 1)))