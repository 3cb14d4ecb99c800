# -*- coding: utf-8 -*-
"""
Power-Mean Filters - Geometric, harmonic, and contraharmonic mean filters.

Nonlinear means over a reflected neighbourhood, each guarded by a small
epsilon so that zero-valued samples never produce ``log(0)`` or a division
by zero.

- ``GeometricMeanFilter``: multiplicative noise, keeps more detail than
  the arithmetic mean
- ``HarmonicMeanFilter``: removes salt noise and Gaussian-like noise
- ``ContraharmonicMeanFilter``: order ``q > 0`` removes pepper noise,
  ``q < 0`` removes salt noise

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
from typing import Annotated, Any, Dict

# denoisekit internal
from denoisekit.image_processing.params import Desc
from denoisekit.image_processing.versioning import processor_tags, processor_version
from denoisekit.image_processing.filters.aggregators import (
    Aggregator,
    ContraharmonicMean,
    GeometricMean,
    HarmonicMean,
)
from denoisekit.image_processing.filters.neighborhood import NeighborhoodFilter
from denoisekit.vocabulary import BoundaryPolicy, FilterKind


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.GEOMETRIC_MEAN, boundary=BoundaryPolicy.REFLECT,
                description='Geometric mean smoothing')
class GeometricMeanFilter(NeighborhoodFilter):
    """Spatial geometric mean filter.

    Output is ``round(exp(mean(log(s + eps))))`` per channel, accumulated
    in the log domain so large kernels cannot overflow.
    """

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return GeometricMean()


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.HARMONIC_MEAN, boundary=BoundaryPolicy.REFLECT,
                description='Harmonic mean smoothing')
class HarmonicMeanFilter(NeighborhoodFilter):
    """Spatial harmonic mean filter, ``round(N / sum(1 / (s + eps)))``."""

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return HarmonicMean()


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.CONTRAHARMONIC_MEAN,
                boundary=BoundaryPolicy.REFLECT,
                description='Contraharmonic mean of order Q')
class ContraharmonicMeanFilter(NeighborhoodFilter):
    """Spatial contraharmonic mean filter of order ``q``.

    Output per channel is::

        round(sum((s + eps) ** (q + 1)) / (sum((s + eps) ** q) + eps))

    clamped to ``[0, 255]``. ``q = 0`` gives the arithmetic mean and
    ``q = -1`` the harmonic mean. The order may be changed per call with
    ``apply(image, q=...)``.

    Parameters
    ----------
    kernel_size : int
        Square kernel side length in pixels. Must be odd. Default is 3.
    q : float
        Filter order. Any finite real. Default is 1.0.
    workers : int
        Worker threads used for the row sweep. Default is 1.

    Examples
    --------
    >>> from denoisekit.image_processing.filters import ContraharmonicMeanFilter
    >>> f = ContraharmonicMeanFilter(kernel_size=3, q=1.5)
    >>> cleaned = f.apply(pepper_image)
    """

    q: Annotated[float, Desc('Filter order Q')] = 1.0

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return ContraharmonicMean(q=params['q'])
