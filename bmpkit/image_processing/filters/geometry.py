# -*- coding: utf-8 -*-
"""
Geometry Filters - Crop.

Author
------
Steven Siebert

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
2026-03-12
"""

# Standard library
from typing import Annotated, Any

# BMPKit internal
from bmpkit.image_processing.base import ImageFilter
from bmpkit.image_processing.params import Desc, Range
from bmpkit.image_processing.versioning import processor_tags, processor_version
from bmpkit.raster import Raster
from bmpkit.vocabulary import FilterCategory


@processor_version('1.0.0')
@processor_tags(category=FilterCategory.GEOMETRY,
                description='Keep the top-left width x height region')
class CropFilter(ImageFilter):
    """Crop to the top-left ``width x height`` region.

    Requested sizes larger than the image leave that dimension unchanged,
    so the filter never enlarges a raster.

    Parameters
    ----------
    width : int
        Requested width in pixels, ``>= 0``.
    height : int
        Requested height in pixels, ``>= 0``.

    Both sizes must be whole-number tokens: ``'200.5'`` is rejected
    rather than truncated to 200, and ``'1_000'`` is rejected.

    Examples
    --------
    >>> CropFilter().apply(raster, ['1999', '999'])
    >>> raster.shape
    (999, 1999)
    """

    alias = '-crop'
    name = 'crop'

    width: Annotated[int, Range(min=0), Desc('Requested width in pixels')]
    height: Annotated[int, Range(min=0), Desc('Requested height in pixels')]

    def _apply(self, raster: Raster, **params: Any) -> None:
        raster.reshape(
            min(raster.height, params['height']),
            min(raster.width, params['width']),
        )
