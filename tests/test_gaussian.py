# -*- coding: utf-8 -*-
"""
Gaussian Kernel Tests - Kernel generation and separable clamp convolution.

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
2026-10-19

Modified
--------
2026-10-19
"""

import math

import numpy as np
import pytest

from denoisekit.exceptions import ValidationError
from denoisekit.image_processing.filters.boundary import clamp_index
from denoisekit.image_processing.filters.gaussian import (
    default_kernel_size,
    gaussian_kernel,
    separable_convolve,
)


def _reference_pass(planes, kernel, axis):
    """Direct 1D clamp convolution with half-up rounding to uint8."""
    radius = (kernel.size - 1) // 2
    moved = np.moveaxis(planes.astype(np.float64), axis, 1)
    out = np.zeros_like(moved)
    n = moved.shape[1]
    for i in range(n):
        for j, w in enumerate(kernel):
            out[:, i] += w * moved[:, clamp_index(i + j - radius, n)]
    out = np.clip(np.floor(out + 0.5), 0, 255).astype(np.uint8)
    return np.moveaxis(out, 1, axis)


class TestKernel:
    """Test Gaussian kernel generation."""

    @pytest.mark.parametrize('sigma', [0.1, 0.5, 1.0, 1.7, 3.0, 10.0])
    def test_sums_to_one_default_size(self, sigma):
        assert abs(gaussian_kernel(sigma).sum() - 1.0) < 1e-6

    @pytest.mark.parametrize('size', [1, 3, 5, 9, 31])
    @pytest.mark.parametrize('sigma', [0.3, 1.0, 4.0])
    def test_sums_to_one_explicit_size(self, sigma, size):
        k = gaussian_kernel(sigma, size)
        assert k.shape == (size,)
        assert abs(k.sum() - 1.0) < 1e-6

    def test_symmetric_and_peaked(self):
        k = gaussian_kernel(1.5, 9)
        np.testing.assert_allclose(k, k[::-1])
        assert k.argmax() == 4

    def test_formula(self):
        k = gaussian_kernel(2.0, 5)
        raw = np.exp(-np.array([4.0, 1.0, 0.0, 1.0, 4.0]) / 8.0)
        np.testing.assert_allclose(k, raw / raw.sum())

    @pytest.mark.parametrize('sigma,size', [
        (1.0, 7), (0.5, 3), (1.5, 9), (2.0, 13), (0.1, 1), (1 / 6, 1),
    ])
    def test_default_size(self, sigma, size):
        assert default_kernel_size(sigma) == size
        assert gaussian_kernel(sigma).size == size

    def test_default_size_is_smallest_odd_at_least_six_sigma(self):
        for sigma in np.linspace(0.05, 5.0, 60):
            size = default_kernel_size(float(sigma))
            assert size % 2 == 1
            assert size >= 6 * sigma - 1e-9
            assert size - 2 < 6 * sigma or size == 1

    @pytest.mark.parametrize('size', [2, 4, 0])
    def test_even_size_raises(self, size):
        with pytest.raises(ValidationError, match="odd"):
            gaussian_kernel(1.0, size)

    def test_non_positive_sigma_raises(self):
        with pytest.raises(ValidationError):
            gaussian_kernel(0.0)
        with pytest.raises(ValidationError):
            default_kernel_size(-2.0)


class TestSeparableConvolve:
    """Test the two-pass clamp convolution."""

    def test_matches_reference_passes(self, random_image):
        planes = random_image[..., :3]
        kernel = gaussian_kernel(1.2)
        expected = _reference_pass(_reference_pass(planes, kernel, 1), kernel, 0)
        result = separable_convolve(planes, kernel)
        assert np.abs(result.astype(int) - expected.astype(int)).max() <= 1

    def test_vertical_pass_reads_quantised_intermediate(self):
        """Rounding after the horizontal pass is visible in the result."""
        planes = np.zeros((3, 3, 1), dtype=np.uint8)
        planes[1, 1, 0] = 1
        kernel = np.array([0.25, 0.5, 0.25])
        # Unquantised 2D response at the centre is 0.25, which rounds to 0;
        # the 8-bit horizontal pass rounds 0.5 up to 1 first.
        result = separable_convolve(planes, kernel)[..., 0]
        expected = np.zeros((3, 3), dtype=np.uint8)
        expected[1, 1] = 1
        np.testing.assert_array_equal(result, expected)

    def test_clamp_boundary(self):
        planes = np.zeros((1, 5, 1), dtype=np.uint8)
        planes[0, 0, 0] = 100
        result = separable_convolve(planes, gaussian_kernel(1.0, 3))
        np.testing.assert_array_equal(result[0, :, 0], [73, 27, 0, 0, 0])

    def test_does_not_modify_input(self, random_image):
        planes = random_image[..., :3].copy()
        before = planes.copy()
        separable_convolve(planes, gaussian_kernel(2.0))
        np.testing.assert_array_equal(planes, before)

    def test_constant_planes_fixed_point(self):
        planes = np.full((6, 9, 3), 200, dtype=np.uint8)
        result = separable_convolve(planes, gaussian_kernel(3.0))
        np.testing.assert_array_equal(result, planes)

    def test_output_range_and_dtype(self, random_image):
        result = separable_convolve(random_image[..., :3], gaussian_kernel(0.8))
        assert result.dtype == np.uint8
        assert result.shape == random_image[..., :3].shape

    def test_progress(self):
        fractions = []
        separable_convolve(np.zeros((3, 3, 3), dtype=np.uint8),
                           gaussian_kernel(1.0), progress=fractions.append)
        assert fractions == [0.5, 1.0]
