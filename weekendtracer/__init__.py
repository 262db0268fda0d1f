"""A small Monte Carlo path tracer that writes PPM images."""

__version__ = "0.1.0"