# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for denoisekit tests.

Provides small synthetic RGBA8 rasters with known structure: uniform,
random, single-outlier, vertical step edge, and varying alpha.

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

import numpy as np
import pytest


def rgba(rows, cols, value=(128, 128, 128, 255)):
    """Uniform ``(rows, cols, 4)`` uint8 raster."""
    image = np.empty((rows, cols, 4), dtype=np.uint8)
    image[...] = np.asarray(value, dtype=np.uint8)
    return image


@pytest.fixture
def make_rgba():
    """Factory for uniform rasters: ``make_rgba(rows, cols, value)``."""
    return rgba


@pytest.fixture
def flat_image():
    """5x5 raster of (128, 128, 128, 255)."""
    return rgba(5, 5)


@pytest.fixture
def random_image():
    """32x24 raster of random colour and random alpha."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(24, 32, 4), dtype=np.uint8)


@pytest.fixture
def single_peak_image():
    """21x21 black raster with one white pixel at (10, 10)."""
    image = rgba(21, 21, (0, 0, 0, 255))
    image[10, 10, :3] = 255
    return image


@pytest.fixture
def salt_pepper_image():
    """3x3 raster of 90 with a salt pixel at the centre."""
    image = rgba(3, 3, (90, 90, 90, 255))
    image[1, 1, :3] = 255
    return image


@pytest.fixture
def step_edge_image():
    """16x16 raster, left half 40, right half 200."""
    image = rgba(16, 16, (40, 40, 40, 255))
    image[:, 8:, :3] = 200
    return image


@pytest.fixture
def gradient_alpha_image():
    """12x10 random colour raster with a horizontal alpha ramp."""
    rng = np.random.default_rng(7)
    image = rng.integers(0, 256, size=(10, 12, 4), dtype=np.uint8)
    image[..., 3] = np.linspace(0, 255, 12).astype(np.uint8)[np.newaxis, :]
    return image
