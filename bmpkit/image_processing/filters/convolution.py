# -*- coding: utf-8 -*-
"""
Convolution Filters - 3x3 matrix filters with edge-clamped borders.

Provides the single-pixel ``apply_matrix`` helper, its vectorized
counterpart ``correlate_kernel``, and the two matrix filters built on them:

- ``SharpeningFilter``: kernel ``[[0,-1,0],[-1,5,-1],[0,-1,0]]``
- ``EdgeDetectionFilter``: grayscale, kernel ``[[0,-1,0],[-1,4,-1],[0,-1,0]]``,
  then a black/white threshold on the first channel

Kernel indexing
---------------
``apply_matrix`` walks kernel row ``i`` and column ``j`` over the pixel at
``(y - 1 + i, x - 1 + j)`` but weights it with ``kernel[j][i]``, i.e. the
kernel is applied transposed. Every built-in kernel is symmetric, so this
only matters for custom kernels; ``correlate_kernel`` reproduces the same
convention so the two always agree.

Matrix filters never write into the grid they read from: each builds a
complete new grid from the pre-filter pixels and swaps it in with
``Raster.replace`` once the pass is finished.

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
2026-03-09
"""

# Standard library
from typing import Annotated, Any, ClassVar, Sequence, Tuple

# Third-party
import numpy as np
from scipy.ndimage import correlate

# BMPKit internal
from bmpkit.image_processing.base import ImageFilter
from bmpkit.image_processing.filters._validation import validate_kernel
from bmpkit.image_processing.filters.color import to_grayscale
from bmpkit.image_processing.params import Desc, Range
from bmpkit.image_processing.versioning import processor_tags, processor_version
from bmpkit.raster import Raster
from bmpkit.vocabulary import FilterCategory


def apply_matrix(
    raster: Raster,
    y: int,
    x: int,
    kernel: Sequence[Sequence[float]],
) -> Tuple[float, float, float]:
    """Convolve one pixel's 3x3 neighborhood with ``kernel``.

    Parameters
    ----------
    raster : Raster
        Source raster. Neighbors outside the grid are edge-clamped.
    y, x : int
        Row and column of the target pixel.
    kernel : Sequence[Sequence[float]]
        3x3 weights, applied transposed (see module docstring).

    Returns
    -------
    Tuple[float, float, float]
        Unclamped ``(sum_r, sum_g, sum_b)``.
    """
    weights = validate_kernel(kernel)
    sum_r = sum_g = sum_b = 0.0
    for i in range(weights.shape[0]):
        for j in range(weights.shape[1]):
            pixel = raster.get(y - 1 + i, x - 1 + j)
            weight = weights[j, i]
            sum_r += pixel.r * weight
            sum_g += pixel.g * weight
            sum_b += pixel.b * weight
    return (sum_r, sum_g, sum_b)


def correlate_kernel(
    pixels: np.ndarray, kernel: Sequence[Sequence[float]]
) -> np.ndarray:
    """Run ``apply_matrix`` over every pixel of a grid at once.

    Parameters
    ----------
    pixels : np.ndarray
        Grid of shape ``(height, width, 3)``. Must not be empty.
    kernel : Sequence[Sequence[float]]
        3x3 weights with the same transposed indexing as
        ``apply_matrix``.

    Returns
    -------
    np.ndarray
        Unclamped per-channel sums, same shape as ``pixels``.
    """
    weights = validate_kernel(kernel).T
    out = np.empty_like(pixels, dtype=np.float64)
    for c in range(pixels.shape[2]):
        out[..., c] = correlate(
            pixels[..., c].astype(np.float64), weights, mode='nearest'
        )
    return out


class MatrixFilter(ImageFilter):
    """Base for filters driven by a fixed 3x3 ``KERNEL``."""

    KERNEL: ClassVar[Tuple[Tuple[int, ...], ...]] = ()

    def convolve(self, raster: Raster) -> np.ndarray:
        """Correlate the current grid with ``KERNEL`` into a new array."""
        return correlate_kernel(raster.pixels, self.KERNEL)


@processor_version('1.0.0')
@processor_tags(category=FilterCategory.ENHANCE,
                description='Sharpen with a 3x3 Laplacian kernel')
class SharpeningFilter(MatrixFilter):
    """Sharpen with ``[[0,-1,0],[-1,5,-1],[0,-1,0]]``.

    Every output pixel is computed from the pre-filter grid; the clamped
    result replaces the grid after the full pass.
    """

    alias = '-sharp'
    name = 'sharpening'

    KERNEL = ((0, -1, 0), (-1, 5, -1), (0, -1, 0))

    def _apply(self, raster: Raster, **params: Any) -> None:
        if raster.is_empty:
            return
        raster.replace(self.convolve(raster))


@processor_version('1.0.0')
@processor_tags(category=FilterCategory.EDGES,
                description='Black/white edge map above a threshold')
class EdgeDetectionFilter(MatrixFilter):
    """Binary edge map from a 3x3 Laplacian over the grayscale image.

    The raster is first converted to grayscale in place. Each output
    pixel is white when the kernel response of its first channel is at
    least ``threshold`` and black otherwise.

    Parameters
    ----------
    threshold : float
        Response threshold in ``[0, 1]``.

    Examples
    --------
    >>> EdgeDetectionFilter().apply(raster, ['0.1'])
    """

    alias = '-edge'
    name = 'edge detection'

    KERNEL = ((0, -1, 0), (-1, 4, -1), (0, -1, 0))

    threshold: Annotated[float, Range(min=0.0, max=1.0),
                         Desc('Edge response threshold')]

    def _apply(self, raster: Raster, **params: Any) -> None:
        to_grayscale(raster)
        if raster.is_empty:
            return
        response = self.convolve(raster)[..., 0]
        edges = (response >= params['threshold']).astype(np.float64)
        raster.replace(np.repeat(edges[..., np.newaxis], 3, axis=2))
