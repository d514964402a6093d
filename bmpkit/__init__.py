# -*- coding: utf-8 -*-
"""
BMPKit - 24-bit bitmap codec and filter engine.

Decodes uncompressed 24-bit BMP files into an in-memory ``Raster``,
applies a chain of pixel and neighborhood filters (crop, grayscale,
negative, sharpen, edge detection, Gaussian blur), and encodes the result
back to the same format.

Dependencies
------------
numpy
scipy

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
2026-03-02

Modified
--------
2026-03-09
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from bmpkit.exceptions import (
    BmpkitError,
    ValidationError,
    NotFoundError,
    CreationError,
    UnsupportedFormatError,
    InvalidArgumentsError,
    InvalidFilterParametersError,
)
from bmpkit.vocabulary import FilterCategory
from bmpkit.raster import Pixel, Raster
from bmpkit.IO import read_bmp, write_bmp
from bmpkit.image_processing import FilterRegistry, Pipeline

__all__ = [
    'BmpkitError',
    'ValidationError',
    'NotFoundError',
    'CreationError',
    'UnsupportedFormatError',
    'InvalidArgumentsError',
    'InvalidFilterParametersError',
    'FilterCategory',
    'Pixel',
    'Raster',
    'read_bmp',
    'write_bmp',
    'FilterRegistry',
    'Pipeline',
]
