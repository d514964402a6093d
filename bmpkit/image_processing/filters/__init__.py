# -*- coding: utf-8 -*-
"""
Filters - The closed set of raster filters.

All filters inherit from ``ImageFilter`` and share the
``apply(raster, parameters)`` contract.

Geometry
    ``CropFilter`` (``-crop width height``) - top-left crop, never enlarges

Color
    ``GrayscaleFilter`` (``-gs``) - BT.601 luminance on all channels
    ``NegativeFilter`` (``-neg``) - channel inversion

Matrix Filters
    ``SharpeningFilter`` (``-sharp``) - 3x3 sharpening kernel
    ``EdgeDetectionFilter`` (``-edge threshold``) - thresholded 3x3 Laplacian

Smoothing
    ``GaussianBlurFilter`` (``-blur sigma``) - separable, unnormalized kernel

Dependencies
------------
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
2026-03-04

Modified
--------
2026-03-05
"""

from bmpkit.image_processing.filters.geometry import CropFilter
from bmpkit.image_processing.filters.color import (
    GrayscaleFilter,
    NegativeFilter,
    to_grayscale,
)
from bmpkit.image_processing.filters.convolution import (
    EdgeDetectionFilter,
    MatrixFilter,
    SharpeningFilter,
    apply_matrix,
    correlate_kernel,
)
from bmpkit.image_processing.filters.linear import (
    GaussianBlurFilter,
    gaussian_coefficients,
)

__all__ = [
    'CropFilter',
    'GrayscaleFilter',
    'NegativeFilter',
    'MatrixFilter',
    'SharpeningFilter',
    'EdgeDetectionFilter',
    'GaussianBlurFilter',
    'apply_matrix',
    'correlate_kernel',
    'gaussian_coefficients',
    'to_grayscale',
]
