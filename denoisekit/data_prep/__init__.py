# -*- coding: utf-8 -*-
"""
Data Preparation Module - Synthetic noisy test rasters.

Key Functions
-------------
- noisy_gradient: Opaque diagonal colour gradient with uniform noise
- noisy_checkerboard: Hue patches on a transparent background with noise
- salt_and_pepper: Impulse corruption of an existing raster
- gaussian_noise: Additive Gaussian corruption of an existing raster

Usage
-----
Build a corrupted scene and clean it up:

    >>> from denoisekit.data_prep import noisy_gradient, salt_and_pepper
    >>> from denoisekit.image_processing import FilterParams, apply_filter
    >>> image = salt_and_pepper(noisy_gradient(seed=0), fraction=0.1, seed=1)
    >>> cleaned = apply_filter(image, FilterParams.median(3))

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
2026-10-19

Modified
--------
2026-10-19
"""

from denoisekit.data_prep.noise import (
    gaussian_noise,
    noisy_checkerboard,
    noisy_gradient,
    salt_and_pepper,
)

__all__ = [
    'noisy_gradient',
    'noisy_checkerboard',
    'salt_and_pepper',
    'gaussian_noise',
]
