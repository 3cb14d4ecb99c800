# -*- coding: utf-8 -*-
"""
Gaussian Kernel - Normalised 1D kernel and separable clamp-boundary convolution.

The 2D Gaussian is the outer product of two identical 1D kernels, so the
blur runs as a horizontal pass over each row followed by a vertical pass
over each column of the horizontal result. The horizontal pass is
quantised to 8 bits before the vertical pass reads it. Both passes sample
past the raster edge with the clamp (edge-replicate) policy, unlike the
reflect policy of the neighbourhood aggregators.

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
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
import math
from typing import Callable, Optional

# Third-party
import numpy as np
from scipy.ndimage import correlate1d

# denoisekit internal
from denoisekit.image_processing.filters._validation import (
    validate_kernel_size,
    validate_sigma,
)
from denoisekit.image_processing.filters.aggregators import to_uint8

logger = logging.getLogger(__name__)


def default_kernel_size(sigma: float) -> int:
    """Smallest odd integer >= ``6 * sigma``.

    Examples
    --------
    >>> default_kernel_size(1.0), default_kernel_size(0.5)
    (7, 3)
    """
    validate_sigma(sigma)
    return math.ceil(6.0 * sigma) | 1


def gaussian_kernel(sigma: float, size: Optional[int] = None) -> np.ndarray:
    """Normalised 1D Gaussian kernel.

    Parameters
    ----------
    sigma : float
        Standard deviation in pixels. Must be positive and finite.
    size : int, optional
        Odd kernel length. Defaults to :func:`default_kernel_size`.

    Returns
    -------
    np.ndarray
        ``(size,)`` float64 array, ``exp(-(i - r)**2 / (2 sigma**2))``
        scaled to sum to 1.

    Raises
    ------
    ValidationError
        If ``sigma`` is not positive or ``size`` is not an odd integer.
    """
    validate_sigma(sigma)
    if size is None:
        size = default_kernel_size(sigma)
    else:
        validate_kernel_size(size, name='size', maximum=None)
    radius = (size - 1) // 2
    offsets = np.arange(size, dtype=np.float64) - radius
    kernel = np.exp(-(offsets ** 2) / (2.0 * sigma * sigma))
    return kernel / kernel.sum()


def separable_convolve(
    planes: np.ndarray,
    kernel: np.ndarray,
    progress: Optional[Callable[[float], None]] = None,
) -> np.ndarray:
    """Convolve ``(rows, cols, channels)`` uint8 planes with a 1D kernel pair.

    Parameters
    ----------
    planes : np.ndarray
        ``(rows, cols, channels)`` uint8 colour planes. Not modified.
    kernel : np.ndarray
        Odd-length 1D kernel applied along both axes.
    progress : callable, optional
        Called with 0.5 after the horizontal pass and 1.0 after the
        vertical pass.

    Returns
    -------
    np.ndarray
        ``(rows, cols, channels)`` uint8 result.
    """
    kernel = np.asarray(kernel, dtype=np.float64)
    logger.debug("Gaussian horizontal pass: kernel length %d", kernel.size)
    horizontal = to_uint8(
        correlate1d(planes.astype(np.float64), kernel, axis=1, mode='nearest')
    )
    if progress is not None:
        progress(0.5)

    logger.debug("Gaussian vertical pass: kernel length %d", kernel.size)
    vertical = to_uint8(
        correlate1d(horizontal.astype(np.float64), kernel, axis=0,
                    mode='nearest')
    )
    if progress is not None:
        progress(1.0)
    return vertical
