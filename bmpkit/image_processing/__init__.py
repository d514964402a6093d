# -*- coding: utf-8 -*-
"""
Image Processing - Filter engine for bitmap rasters.

Provides the ``ImageFilter`` base class, the closed set of built-in
filters, the alias-keyed ``FilterRegistry``, and the ``Pipeline`` that
applies a sequence of filters to one raster.

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
2026-03-03

Modified
--------
2026-03-06
"""

from bmpkit.image_processing.base import ImageFilter
from bmpkit.image_processing.params import Desc, ParamSpec, Range
from bmpkit.image_processing.versioning import processor_tags, processor_version
from bmpkit.image_processing.filters import (
    CropFilter,
    EdgeDetectionFilter,
    GaussianBlurFilter,
    GrayscaleFilter,
    MatrixFilter,
    NegativeFilter,
    SharpeningFilter,
    apply_matrix,
    correlate_kernel,
    gaussian_coefficients,
)
from bmpkit.image_processing.registry import DEFAULT_FILTERS, FilterRegistry
from bmpkit.image_processing.pipeline import Pipeline

__all__ = [
    'ImageFilter',
    'ParamSpec',
    'Range',
    'Desc',
    'processor_version',
    'processor_tags',
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
    'FilterRegistry',
    'DEFAULT_FILTERS',
    'Pipeline',
]
