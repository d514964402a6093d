# -*- coding: utf-8 -*-
"""
Filter Tests - Crop, color, matrix, and Gaussian blur filters.

Convolution results are checked against an independent ``np.pad``
reference so the scipy-backed paths are verified without trusting the
same code twice.

Dependencies
------------
pytest
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
2026-03-07

Modified
--------
2026-03-12
"""

# Third-party
import numpy as np
import pytest

# BMPKit internal
from bmpkit.exceptions import (
    BmpkitError,
    InvalidFilterParametersError,
    ValidationError,
)
from bmpkit.image_processing.filters import (
    CropFilter,
    EdgeDetectionFilter,
    GaussianBlurFilter,
    GrayscaleFilter,
    NegativeFilter,
    SharpeningFilter,
    apply_matrix,
    correlate_kernel,
    gaussian_coefficients,
)
from bmpkit.image_processing.filters._validation import validate_kernel
from bmpkit.raster import Pixel, Raster

ASYMMETRIC = ((1, 2, 3), (4, 5, 6), (7, 8, 9))


def _reference_matrix(pixels, kernel):
    """Edge-padded 3x3 sum weighting neighbor (y-1+i, x-1+j) by kernel[j][i]."""
    kernel = np.asarray(kernel, dtype=np.float64)
    padded = np.pad(pixels, ((1, 1), (1, 1), (0, 0)), mode='edge')
    h, w = pixels.shape[:2]
    out = np.zeros_like(pixels)
    for i in range(3):
        for j in range(3):
            out += kernel[j, i] * padded[i:i + h, j:j + w]
    return out


def _reference_blur(pixels, weights):
    """Two clamped edge-padded 1D passes, horizontal then vertical."""
    radius = (len(weights) - 1) // 2
    h, w = pixels.shape[:2]

    padded = np.pad(pixels, ((0, 0), (radius, radius), (0, 0)), mode='edge')
    horizontal = np.zeros_like(pixels)
    for k, weight in enumerate(weights):
        horizontal += weight * padded[:, k:k + w]
    horizontal = np.clip(horizontal, 0.0, 1.0)

    padded = np.pad(horizontal, ((radius, radius), (0, 0), (0, 0)), mode='edge')
    vertical = np.zeros_like(pixels)
    for k, weight in enumerate(weights):
        vertical += weight * padded[k:k + h]
    return np.clip(vertical, 0.0, 1.0)


def _gradient_raster():
    """3x5 raster whose rows are identical gray ramps."""
    row = np.array([1.0, 0.85, 0.5, 0.0, 0.0])
    pixels = np.repeat(np.tile(row, (3, 1))[..., np.newaxis], 3, axis=2)
    return Raster.from_array(pixels)


class TestCrop:
    """Top-left crop with min(current, requested) semantics."""

    def test_crop_large_image(self):
        raster = Raster(2048, 2048)
        CropFilter().apply(raster, ['1999', '999'])
        assert raster.shape == (999, 1999)

    def test_keeps_top_left(self, random_raster):
        original = random_raster.pixels.copy()
        CropFilter().apply(random_raster, ['3', '4'])
        assert random_raster.shape == (4, 3)
        np.testing.assert_array_equal(random_raster.pixels, original[:4, :3])

    def test_idempotent(self, random_raster):
        """Repeating a crop with the same sizes changes nothing."""
        CropFilter().apply(random_raster, ['3', '4'])
        once = random_raster.pixels.copy()
        CropFilter().apply(random_raster, ['3', '4'])
        assert random_raster.shape == (4, 3)
        np.testing.assert_array_equal(random_raster.pixels, once)

    def test_never_enlarges(self, random_raster):
        CropFilter().apply(random_raster, ['100', '2'])
        assert random_raster.shape == (2, 5)

    def test_crop_to_zero(self, random_raster):
        CropFilter().apply(random_raster, ['0', '0'])
        assert random_raster.is_empty

    def test_preserves_resolution(self, random_raster):
        CropFilter().apply(random_raster, ['1', '1'])
        assert random_raster.resolution == (3780, 2835)

    @pytest.mark.parametrize("params", [
        ['100'],
        ['100', '100', '100'],
        ['-5', '10'],
        ['1.5', '10'],
        ['wide', '10'],
        ['200.5', '10'],
        ['1_000', '10'],
    ])
    def test_invalid_parameters(self, random_raster, params):
        with pytest.raises(InvalidFilterParametersError, match="crop") as exc_info:
            CropFilter().apply(random_raster, params)
        assert exc_info.value.filter_name == 'crop'
        assert random_raster.shape == (7, 5)


class TestColorFilters:
    """Grayscale and negative."""

    def test_grayscale_weights(self):
        raster = Raster.from_array(np.array([[[1.0, 0.0, 0.0],
                                              [0.0, 1.0, 0.0],
                                              [0.0, 0.0, 1.0]]]))
        GrayscaleFilter().apply(raster)
        np.testing.assert_allclose(raster.pixels[0, :, 0], [0.299, 0.587, 0.114])
        np.testing.assert_array_equal(raster.pixels[..., 0], raster.pixels[..., 1])
        np.testing.assert_array_equal(raster.pixels[..., 0], raster.pixels[..., 2])

    def test_grayscale_idempotent(self, random_raster):
        GrayscaleFilter().apply(random_raster)
        once = random_raster.pixels.copy()
        GrayscaleFilter().apply(random_raster)
        np.testing.assert_allclose(random_raster.pixels, once, atol=1e-12)

    def test_grayscale_rejects_parameters(self, random_raster):
        with pytest.raises(InvalidFilterParametersError,
                           match="expected 0 parameter"):
            GrayscaleFilter().apply(random_raster, ['1'])

    def test_negative(self):
        raster = Raster.from_array(np.array([[[0.0, 0.25, 1.0]]]))
        NegativeFilter().apply(raster)
        assert raster.get(0, 0) == Pixel(1.0, 0.75, 0.0)

    def test_negative_involution(self, random_raster):
        original = random_raster.copy()
        NegativeFilter().apply(random_raster)
        NegativeFilter().apply(random_raster)
        for i in range(original.height):
            for j in range(original.width):
                assert random_raster.get(i, j) == original.get(i, j)

    def test_empty_raster(self):
        raster = Raster(0, 0)
        GrayscaleFilter().apply(raster)
        NegativeFilter().apply(raster)
        assert raster.shape == (0, 0)


class TestMatrixHelpers:
    """apply_matrix, correlate_kernel, and kernel validation."""

    def test_apply_matrix_matches_reference(self, random_raster):
        expected = _reference_matrix(random_raster.pixels, ASYMMETRIC)
        for y in range(random_raster.height):
            for x in range(random_raster.width):
                np.testing.assert_allclose(
                    apply_matrix(random_raster, y, x, ASYMMETRIC),
                    expected[y, x],
                )

    def test_correlate_kernel_matches_reference(self, random_raster):
        np.testing.assert_allclose(
            correlate_kernel(random_raster.pixels, ASYMMETRIC),
            _reference_matrix(random_raster.pixels, ASYMMETRIC),
            atol=1e-12,
        )

    def test_kernel_is_applied_transposed(self):
        """The pixel right of center is weighted by kernel[2][1]."""
        raster = Raster(3, 3)
        raster.set(1, 2, Pixel(1.0, 1.0, 1.0))
        kernel = ((0, 0, 0), (0, 0, 7), (0, 3, 0))
        assert apply_matrix(raster, 1, 1, kernel) == (3.0, 3.0, 3.0)

    def test_apply_matrix_is_unclamped(self, flat_raster):
        r, g, b = apply_matrix(flat_raster, 0, 0, ((1, 1, 1),) * 3)
        assert r == pytest.approx(4.5)

    @pytest.mark.parametrize("kernel", [
        ((1, 2), (3, 4)),
        ((1, 2, 3),),
        (('a', 'b', 'c'),) * 3,
    ])
    def test_validate_kernel_rejects(self, kernel):
        with pytest.raises(ValidationError):
            validate_kernel(kernel)

    def test_validate_kernel_returns_float_array(self):
        weights = validate_kernel(ASYMMETRIC)
        assert weights.dtype == np.float64
        assert weights.shape == (3, 3)


class TestSharpening:
    """3x3 sharpening kernel."""

    def test_single_bright_pixel(self):
        raster = Raster(3, 3)
        raster.set(1, 1, Pixel(0.2, 0.2, 0.2))
        SharpeningFilter().apply(raster)

        assert raster.get(1, 1) == Pixel(1.0, 1.0, 1.0)
        for i in range(3):
            for j in range(3):
                if (i, j) != (1, 1):
                    assert raster.get(i, j) == Pixel(0.0, 0.0, 0.0)

    def test_flat_image_unchanged(self, flat_raster):
        SharpeningFilter().apply(flat_raster)
        np.testing.assert_allclose(flat_raster.pixels, 0.5)

    def test_matches_reference(self, random_raster):
        expected = np.clip(
            _reference_matrix(random_raster.pixels, SharpeningFilter.KERNEL),
            0.0, 1.0,
        )
        SharpeningFilter().apply(random_raster)
        np.testing.assert_allclose(random_raster.pixels, expected, atol=1e-12)

    def test_output_in_range(self, random_raster):
        SharpeningFilter().apply(random_raster)
        assert random_raster.pixels.min() >= 0.0
        assert random_raster.pixels.max() <= 1.0

    def test_empty_raster(self):
        raster = Raster(0, 4)
        SharpeningFilter().apply(raster)
        assert raster.shape == (0, 4)


class TestEdgeDetection:
    """Thresholded Laplacian over the grayscale image."""

    def test_gradient(self):
        raster = _gradient_raster()
        EdgeDetectionFilter().apply(raster, ['0.1'])
        expected = np.array([1.0, 1.0, 1.0, 0.0, 0.0])
        for row in range(3):
            np.testing.assert_array_equal(raster.pixels[row, :, 0], expected)
        np.testing.assert_array_equal(raster.pixels[..., 0], raster.pixels[..., 2])

    def test_edge_of_edge_differs(self):
        raster = _gradient_raster()
        EdgeDetectionFilter().apply(raster, ['0.1'])
        first = raster.pixels.copy()
        EdgeDetectionFilter().apply(raster, ['0.1'])

        assert not np.array_equal(raster.pixels, first)
        np.testing.assert_array_equal(
            raster.pixels[0, :, 0], [0.0, 0.0, 1.0, 0.0, 0.0]
        )

    def test_matches_reference(self, random_raster):
        gray = random_raster.pixels @ np.array([0.299, 0.587, 0.114])
        gray = np.repeat(gray[..., np.newaxis], 3, axis=2)
        response = _reference_matrix(gray, EdgeDetectionFilter.KERNEL)[..., 0]
        expected = (response >= 0.05).astype(np.float64)

        EdgeDetectionFilter().apply(random_raster, ['0.05'])
        np.testing.assert_array_equal(random_raster.pixels[..., 0], expected)

    def test_output_is_binary(self, random_raster):
        EdgeDetectionFilter().apply(random_raster, ['0.2'])
        assert set(np.unique(random_raster.pixels)) <= {0.0, 1.0}

    def test_flat_image(self, flat_raster):
        """A flat image has zero response everywhere."""
        EdgeDetectionFilter().apply(flat_raster, ['0.1'])
        assert np.all(flat_raster.pixels == 0.0)

    def test_zero_threshold_accepts_zero_response(self):
        raster = Raster(4, 4)
        EdgeDetectionFilter().apply(raster, ['0'])
        assert np.all(raster.pixels == 1.0)

    @pytest.mark.parametrize("params", [[], ['1.5'], ['-0.1'], ['x'], ['nan']])
    def test_invalid_threshold(self, random_raster, params):
        with pytest.raises(InvalidFilterParametersError, match="edge detection"):
            EdgeDetectionFilter().apply(random_raster, params)


class TestGaussianCoefficients:
    """Kernel construction."""

    def test_sigma_one(self):
        weights = gaussian_coefficients(1.0)
        assert weights.size == 13
        assert weights[6] == pytest.approx(1.0 / np.sqrt(2.0 * np.pi))
        np.testing.assert_allclose(weights, weights[::-1])
        assert np.argmax(weights) == 6

    def test_radius_uses_ceiling(self):
        assert gaussian_coefficients(1.5).size == 2 * 12 + 1
        assert gaussian_coefficients(0.1).size == 13

    def test_unnormalized(self):
        weights = gaussian_coefficients(2.0)
        offsets = np.arange(-12, 13)
        expected = np.exp(-offsets ** 2 / 8.0) / (np.sqrt(2.0 * np.pi) * 2.0)
        np.testing.assert_allclose(weights, expected)

    def test_sigma_zero(self):
        np.testing.assert_array_equal(gaussian_coefficients(0.0), [1.0])

    @pytest.mark.parametrize("sigma", [-0.5, float('nan'), float('inf')])
    def test_invalid_sigma(self, sigma):
        with pytest.raises(ValidationError):
            gaussian_coefficients(sigma)


class TestGaussianBlur:
    """Separable two-pass blur."""

    def test_sigma_zero_is_identity(self, random_raster):
        original = random_raster.pixels.copy()
        GaussianBlurFilter().apply(random_raster, ['0'])
        np.testing.assert_allclose(random_raster.pixels, original)

    def test_flat_image_scaled_by_weight_sum(self, flat_raster):
        total = gaussian_coefficients(1.0).sum()
        GaussianBlurFilter().apply(flat_raster, ['1'])
        np.testing.assert_allclose(flat_raster.pixels, 0.5 * total ** 2)

    def test_matches_reference(self, random_raster):
        """Kernel wider than the image still clamps at the borders."""
        weights = gaussian_coefficients(1.0)
        expected = _reference_blur(random_raster.pixels, weights)
        GaussianBlurFilter().apply(random_raster, ['1'])
        np.testing.assert_allclose(random_raster.pixels, expected, atol=1e-12)

    def test_smooths_step(self):
        pixels = np.zeros((1, 20, 3))
        pixels[:, 10:] = 1.0
        raster = Raster.from_array(pixels)
        GaussianBlurFilter().apply(raster, ['2'])
        row = raster.pixels[0, :, 0]
        assert 0.0 < row[9] < row[10] < 1.0
        assert np.all(np.diff(row) >= -1e-12)

    def test_output_in_range(self, random_raster):
        GaussianBlurFilter().apply(random_raster, ['0.7'])
        assert random_raster.pixels.min() >= 0.0
        assert random_raster.pixels.max() <= 1.0

    def test_empty_raster(self):
        raster = Raster(0, 0)
        GaussianBlurFilter().apply(raster, ['3'])
        assert raster.shape == (0, 0)

    @pytest.mark.parametrize("params", [['-0.5'], ['abc'], ['inf'], [], ['1', '2']])
    def test_invalid_sigma(self, random_raster, params):
        with pytest.raises(InvalidFilterParametersError, match="blur") as exc_info:
            GaussianBlurFilter().apply(random_raster, params)
        assert isinstance(exc_info.value, BmpkitError)


class TestFilterMetadata:
    """Aliases, names, and usage strings."""

    @pytest.mark.parametrize("filter_cls, alias, name, usage", [
        (CropFilter, '-crop', 'crop', '-crop width height'),
        (GrayscaleFilter, '-gs', 'grayscale', '-gs'),
        (NegativeFilter, '-neg', 'negative', '-neg'),
        (SharpeningFilter, '-sharp', 'sharpening', '-sharp'),
        (EdgeDetectionFilter, '-edge', 'edge detection', '-edge threshold'),
        (GaussianBlurFilter, '-blur', 'blur', '-blur sigma'),
    ])
    def test_metadata(self, filter_cls, alias, name, usage):
        assert filter_cls.alias == alias
        assert filter_cls.name == name
        assert filter_cls.usage() == usage
        assert filter_cls.__processor_version__ == '1.0.0'
        assert filter_cls.__processor_tags__['description']
