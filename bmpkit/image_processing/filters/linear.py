# -*- coding: utf-8 -*-
"""
Linear Smoothing Filters - Separable Gaussian blur.

The blur runs as two one-dimensional passes, horizontal then vertical,
each backed by ``scipy.ndimage.correlate1d`` with ``mode='nearest'`` so
that samples past the border repeat the edge pixel. Each pass produces a
complete new clamped grid before the next pass reads it.

The kernel is not renormalized: weights follow the Gaussian
density ``1 / (sqrt(2 pi) sigma) * exp(-d^2 / (2 sigma^2))`` over a radius
of ``6 * ceil(sigma)`` samples, so overall brightness can drift slightly
from the input.

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
2026-03-05

Modified
--------
2026-03-09
"""

# Standard library
import logging
import math
from typing import Annotated, Any

# Third-party
import numpy as np
from scipy.ndimage import correlate1d

# BMPKit internal
from bmpkit.exceptions import ValidationError
from bmpkit.image_processing.base import ImageFilter
from bmpkit.image_processing.params import Desc, Range
from bmpkit.image_processing.versioning import processor_tags, processor_version
from bmpkit.raster import Raster
from bmpkit.vocabulary import FilterCategory

logger = logging.getLogger(__name__)

#: Kernel radius in units of ``ceil(sigma)``.
RADIUS_PER_SIGMA = 6


def gaussian_coefficients(sigma: float) -> np.ndarray:
    """Compute the unnormalized 1D Gaussian kernel for ``sigma``.

    Parameters
    ----------
    sigma : float
        Standard deviation in pixels, ``>= 0``.

    Returns
    -------
    np.ndarray
        ``2 * radius + 1`` weights with ``radius = 6 * ceil(sigma)``.
        ``sigma == 0`` gives the single weight ``[1.0]``.

    Raises
    ------
    ValidationError
        If ``sigma`` is negative or not finite.
    """
    if not math.isfinite(sigma) or sigma < 0:
        raise ValidationError(f"sigma must be finite and >= 0, got {sigma!r}")
    if sigma == 0:
        return np.ones(1, dtype=np.float64)

    radius = math.ceil(sigma) * RADIUS_PER_SIGMA
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    scale = 1.0 / (math.sqrt(2.0 * math.pi) * sigma)
    return scale * np.exp(-(offsets ** 2) / (2.0 * sigma ** 2))


@processor_version('1.0.0')
@processor_tags(category=FilterCategory.SMOOTHING,
                description='Separable Gaussian blur')
class GaussianBlurFilter(ImageFilter):
    """Gaussian blur as a horizontal then a vertical 1D pass.

    Parameters
    ----------
    sigma : float
        Gaussian standard deviation in pixels, ``>= 0``. ``0`` leaves the
        image unchanged.

    Examples
    --------
    >>> GaussianBlurFilter().apply(raster, ['1.5'])
    """

    alias = '-blur'
    name = 'blur'

    sigma: Annotated[float, Range(min=0.0),
                     Desc('Gaussian standard deviation in pixels')]

    @staticmethod
    def blur_pass(pixels: np.ndarray, weights: np.ndarray, axis: int) -> np.ndarray:
        """One clamped 1D pass along ``axis`` (1 horizontal, 0 vertical)."""
        blurred = correlate1d(pixels, weights, axis=axis, mode='nearest')
        return np.clip(blurred, 0.0, 1.0)

    def _apply(self, raster: Raster, **params: Any) -> None:
        if raster.is_empty:
            return
        weights = gaussian_coefficients(params['sigma'])
        logger.debug(
            "Gaussian kernel: %d taps, weight sum %.6f",
            weights.size, weights.sum(),
        )
        raster.replace(self.blur_pass(raster.pixels, weights, axis=1))
        raster.replace(self.blur_pass(raster.pixels, weights, axis=0))
