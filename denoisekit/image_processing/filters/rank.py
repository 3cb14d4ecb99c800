# -*- coding: utf-8 -*-
"""
Rank Filters - Order-statistic filters over a reflected neighbourhood.

- ``MedianFilter``: histogram median, suppresses salt-and-pepper noise
- ``MinFilter``: local minimum (erosion)
- ``MaxFilter``: local maximum (dilation)
- ``MidpointFilter``: rounded mean of the local minimum and maximum

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
from typing import Any, Dict

# denoisekit internal
from denoisekit.image_processing.versioning import processor_tags, processor_version
from denoisekit.image_processing.filters.aggregators import (
    Aggregator,
    Maximum,
    Median,
    Midpoint,
    Minimum,
)
from denoisekit.image_processing.filters.neighborhood import NeighborhoodFilter
from denoisekit.vocabulary import BoundaryPolicy, FilterKind


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.MEDIAN, boundary=BoundaryPolicy.REFLECT,
                description='Histogram median, edge-preserving denoising')
class MedianFilter(NeighborhoodFilter):
    """Spatial median filter.

    Replaces each colour channel with the median of its neighbourhood.
    Effective against salt-and-pepper (impulse) noise while preserving
    edges better than linear filters.

    Parameters
    ----------
    kernel_size : int
        Square kernel side length in pixels. Must be odd. Default is 3.
    workers : int
        Worker threads used for the row sweep. Default is 1.

    Examples
    --------
    >>> from denoisekit.image_processing.filters import MedianFilter
    >>> f = MedianFilter(kernel_size=5)
    >>> denoised = f.apply(image)
    """

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return Median()


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.MIN, boundary=BoundaryPolicy.REFLECT,
                description='Local minimum (erosion)')
class MinFilter(NeighborhoodFilter):
    """Spatial minimum filter (morphological erosion).

    Suppresses bright (salt) outliers and darkens the image.
    """

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return Minimum()


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.MAX, boundary=BoundaryPolicy.REFLECT,
                description='Local maximum (dilation)')
class MaxFilter(NeighborhoodFilter):
    """Spatial maximum filter (morphological dilation).

    Suppresses dark (pepper) outliers and brightens the image.
    """

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return Maximum()


@processor_version('1.0.0')
@processor_tags(kind=FilterKind.MIDPOINT, boundary=BoundaryPolicy.REFLECT,
                description='Midpoint of local minimum and maximum')
class MidpointFilter(NeighborhoodFilter):
    """Spatial midpoint filter.

    Output is ``round((min + max) / 2)`` per channel, which always lies
    between the ``MinFilter`` and ``MaxFilter`` results. Works best on
    uniformly distributed noise.
    """

    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        return Midpoint()
