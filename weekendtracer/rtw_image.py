"""Loading of texture images from disk."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

_CANDIDATE_DIRS = (
    ".",
    "images",
    "../images",
    "../../images",
    "../../../images",
    "../../../../images",
    "../../../../../images",
    "../../../../../../images",
)

_MAGENTA = (255, 0, 255)


def search_paths(filename):
    """Paths tried, in order, when loading ``filename``.

    The directory named by the RTW_IMAGES environment variable comes first,
    followed by the current directory and a series of ``images`` folders.
    """
    paths = []
    imagedir = os.environ.get("RTW_IMAGES")
    if imagedir is not None:
        paths.append(Path(imagedir) / filename)
    paths.extend(Path(base) / filename for base in _CANDIDATE_DIRS)
    return paths


def float_to_byte(value):
    """Map a linear [0, 1] component to an 8-bit value."""
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return 255
    return int(256.0 * value)


@dataclass
class RtwImage:
    """An RGB image held both as floats in [0, 1] and as bytes."""

    width: int = 0
    height: int = 0
    fdata: list = field(default_factory=list)
    bdata: bytes = b""

    @classmethod
    def load(cls, filename):
        """Load ``filename`` from the first search path that holds a readable image."""
        for path in search_paths(filename):
            try:
                with Image.open(path) as img:
                    return cls.from_image(img)
            except (OSError, ValueError):
                continue
        raise FileNotFoundError(f"Could not load image file '{filename}'")

    @classmethod
    def from_image(cls, img):
        """Build an image from a Pillow image."""
        rgb = img.convert("RGB")
        width, height = rgb.size
        fdata = [b / 255.0 for b in rgb.tobytes()]
        bdata = bytes(float_to_byte(f) for f in fdata)
        return cls(width=width, height=height, fdata=fdata, bdata=bdata)

    def pixel_data(self, x, y):
        """The (r, g, b) bytes at (x, y), clamped to the image; magenta if empty."""
        if not self.bdata:
            return _MAGENTA
        x = max(0, min(x, self.width - 1))
        y = max(0, min(y, self.height - 1))
        idx = (y * self.width + x) * 3
        return tuple(self.bdata[idx : idx + 3])