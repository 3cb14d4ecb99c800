# -*- coding: utf-8 -*-
"""
Linear Spatial Filters - Mean (box) and Gaussian smoothing filters.

- ``MeanFilter``: rounded arithmetic mean over a reflected square
  neighbourhood, O(size^2) per pixel
- ``GaussianFilter``: separable Gaussian blur with clamp boundary, two 1D
  passes, O(size) per pixel

Both filters operate on the R, G, B channels of an RGBA8 raster and copy
alpha through unchanged.

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
from typing import Annotated, Any, Dict, Optional

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.image_processing.base import AlphaPreservingMixin, ImageTransform
from denoisekit.image_processing.params import Desc, Odd
from denoisekit.image_processing.versioning import processor_tags, processor_version
from denoisekit.image_processing.filters._validation import (
    validate_kernel_size,
    validate_sigma,
)
from denoisekit.image_processing.filters.aggregators import (
    Aggregator,
    ArithmeticMean,
)
from denoisekit.image_processing.filters.gaussian import (
    gaussian_kernel,
    separable_convolve,
)
from denoisekit.image_processing.filters.neighborhood import NeighborhoodFilter
from denoisekit.vocabulary import BoundaryPolicy, FilterKind


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.MEAN, boundary=BoundaryPolicy.REFLECT,
                description='Arithmetic mean (box) smoothing')
class MeanFilter(NeighborhoodFilter):
    """Spatial mean (box) filter.

    Replaces each colour channel with ``round(sum / N)`` over the
    ``N = kernel_size ** 2`` samples of its reflected neighbourhood.
    ``kernel_size=1`` is the identity.

    Parameters
    ----------
    kernel_size : int
        Square kernel side length in pixels. Must be odd. Default is 3.
    workers : int
        Worker threads used for the row sweep. Default is 1.

    Examples
    --------
    >>> from denoisekit.image_processing.filters import MeanFilter
    >>> f = MeanFilter(kernel_size=5)
    >>> smoothed = f.apply(image)
    """

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return ArithmeticMean()


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.GAUSSIAN, boundary=BoundaryPolicy.CLAMP,
                description='Separable Gaussian smoothing')
class GaussianFilter(AlphaPreservingMixin, ImageTransform):
    """Gaussian smoothing filter using separable convolution.

    Builds a normalised 1D kernel ``exp(-(i - r)**2 / (2 sigma**2))`` and
    applies it as a horizontal pass followed by a vertical pass over the
    8-bit horizontal result. Samples past the edge replicate the nearest
    edge pixel.

    Parameters
    ----------
    sigma : float
        Gaussian standard deviation in pixels. Must be positive.
        Default is 1.0.
    kernel_size : int, optional
        Odd kernel length. Default is the smallest odd integer
        ``>= 6 * sigma``.

    Raises
    ------
    ValidationError
        If ``sigma`` is not positive or ``kernel_size`` is even.

    Examples
    --------
    >>> from denoisekit.image_processing.filters import GaussianFilter
    >>> f = GaussianFilter(sigma=2.0)
    >>> smoothed = f.apply(image)
    """

    sigma: Annotated[float, Desc('Gaussian standard deviation (> 0)')] = 1.0
    kernel_size: Annotated[Optional[int], Odd(),
                           Desc('Kernel length; default ceil(6*sigma) | 1')] = None

    def __init__(
        self,
        sigma: float = 1.0,
        kernel_size: Optional[int] = None,
    ) -> None:
        validate_sigma(sigma)
        if kernel_size is not None:
            validate_kernel_size(kernel_size, maximum=None)
        self.sigma = sigma
        self.kernel_size = kernel_size

    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Blur the colour planes.

        Parameters
        ----------
        rgb : np.ndarray
            ``(rows, cols, 3)`` uint8 colour planes.

        Returns
        -------
        np.ndarray
            Blurred planes, same shape, uint8.
        """
        params = self._resolve_params(kwargs)
        kernel = gaussian_kernel(params['sigma'], params['kernel_size'])
        return separable_convolve(
            rgb, kernel,
            progress=lambda fraction: self._report_progress(kwargs, fraction),
        )
