# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared kernel validation for matrix filters.

Provides the reusable check that every convolution kernel handed to
``apply_matrix`` or ``correlate_kernel`` is a numeric 3x3 matrix. Both
helpers anchor the kernel one pixel up and to the left of the target
pixel, so larger or non-square kernels would be applied off-center.

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
2026-03-04
"""

# Standard library
from typing import Sequence

# Third-party
import numpy as np

# BMPKit internal
from bmpkit.exceptions import ValidationError


KERNEL_SHAPE = (3, 3)


def validate_kernel(kernel: Sequence[Sequence[float]]) -> np.ndarray:
    """Validate that ``kernel`` is a numeric 3x3 matrix.

    Parameters
    ----------
    kernel : Sequence[Sequence[float]]
        Kernel weights, indexed ``kernel[row][col]``.

    Returns
    -------
    np.ndarray
        The kernel as a ``float64`` array.

    Raises
    ------
    ValidationError
        If ``kernel`` is not numeric or not 3x3.
    """
    try:
        weights = np.asarray(kernel, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"kernel must be numeric: {exc}") from exc
    if weights.shape != KERNEL_SHAPE:
        raise ValidationError(
            f"kernel must have shape {KERNEL_SHAPE}, got {weights.shape}"
        )
    return weights
