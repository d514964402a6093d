# -*- coding: utf-8 -*-
"""
Color Filters - Per-pixel grayscale and negative transforms.

Both filters touch each pixel independently, so they modify the raster's
grid in place.

- ``GrayscaleFilter``: ITU-R BT.601 luminance written to all channels
- ``NegativeFilter``: ``c -> 1 - c`` on every channel

Dependencies
------------
numpy

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-04

Modified
--------
2026-03-06
"""

# Standard library
from typing import Any

# Third-party
import numpy as np

# BMPKit internal
from bmpkit.image_processing.base import ImageFilter
from bmpkit.image_processing.versioning import processor_tags, processor_version
from bmpkit.raster import Raster
from bmpkit.vocabulary import FilterCategory


#: Red, green, blue luminance weights.
LUMA_COEFFICIENTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def to_grayscale(raster: Raster) -> None:
    """Replace every pixel of ``raster`` with its luminance, in place."""
    pixels = raster.pixels
    luminance = np.clip(pixels @ LUMA_COEFFICIENTS, 0.0, 1.0)
    pixels[...] = luminance[..., np.newaxis]


@processor_version('1.0.0')
@processor_tags(category=FilterCategory.COLOR,
                description='Convert to grayscale')
class GrayscaleFilter(ImageFilter):
    """Replace each pixel with ``0.299 r + 0.587 g + 0.114 b`` on all channels.

    Idempotent: once ``r == g == b`` the weighted sum returns the same
    value.
    """

    alias = '-gs'
    name = 'grayscale'

    def _apply(self, raster: Raster, **params: Any) -> None:
        to_grayscale(raster)


@processor_version('1.0.0')
@processor_tags(category=FilterCategory.COLOR,
                description='Invert every color channel')
class NegativeFilter(ImageFilter):
    """Invert every channel: ``c -> 1 - c``. Applying twice is a no-op."""

    alias = '-neg'
    name = 'negative'

    def _apply(self, raster: Raster, **params: Any) -> None:
        pixels = raster.pixels
        np.subtract(1.0, pixels, out=pixels)
