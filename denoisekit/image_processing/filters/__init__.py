# -*- coding: utf-8 -*-
"""
Spatial Filters - Neighbourhood and separable denoising filters for RGBA8 rasters.

Every filter inherits from ``AlphaPreservingMixin`` and ``ImageTransform``:
it reads the R, G, B channels of a ``(rows, cols, 4)`` uint8 raster (or an
``ImageBuffer``), writes a new raster of the same shape, and copies alpha
through unchanged.

Linear Filters
    ``MeanFilter`` - arithmetic mean over a reflected neighbourhood
    ``GaussianFilter`` - separable Gaussian blur, clamp boundary

Rank Filters
    ``MedianFilter`` - histogram median (salt-and-pepper suppression)
    ``MinFilter`` - local minimum (erosion)
    ``MaxFilter`` - local maximum (dilation)
    ``MidpointFilter`` - mean of local minimum and maximum

Power-Mean Filters
    ``GeometricMeanFilter`` - log-domain geometric mean
    ``HarmonicMeanFilter`` - harmonic mean
    ``ContraharmonicMeanFilter`` - contraharmonic mean of order Q

Building Blocks
    ``KernelSpec``, ``ReflectedNeighborhood``, ``sweep_rows``, the
    ``Aggregator`` family, ``gaussian_kernel`` and ``separable_convolve``.

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

from denoisekit.image_processing.filters.aggregators import (
    Aggregator,
    ArithmeticMean,
    ContraharmonicMean,
    GeometricMean,
    HarmonicMean,
    Maximum,
    Median,
    Midpoint,
    Minimum,
)
from denoisekit.image_processing.filters.boundary import (
    clamp_index,
    reflect_index,
)
from denoisekit.image_processing.filters.gaussian import (
    default_kernel_size,
    gaussian_kernel,
    separable_convolve,
)
from denoisekit.image_processing.filters.kernel import KernelSpec
from denoisekit.image_processing.filters.neighborhood import (
    NeighborhoodFilter,
    ReflectedNeighborhood,
    sweep_rows,
)
from denoisekit.image_processing.filters.linear import GaussianFilter, MeanFilter
from denoisekit.image_processing.filters.rank import (
    MaxFilter,
    MedianFilter,
    MidpointFilter,
    MinFilter,
)
from denoisekit.image_processing.filters.power_mean import (
    ContraharmonicMeanFilter,
    GeometricMeanFilter,
    HarmonicMeanFilter,
)

__all__ = [
    'MeanFilter',
    'GaussianFilter',
    'MedianFilter',
    'MinFilter',
    'MaxFilter',
    'MidpointFilter',
    'GeometricMeanFilter',
    'HarmonicMeanFilter',
    'ContraharmonicMeanFilter',
    'NeighborhoodFilter',
    'KernelSpec',
    'ReflectedNeighborhood',
    'sweep_rows',
    'reflect_index',
    'clamp_index',
    'Aggregator',
    'ArithmeticMean',
    'Minimum',
    'Maximum',
    'Midpoint',
    'Median',
    'GeometricMean',
    'HarmonicMean',
    'ContraharmonicMean',
    'default_kernel_size',
    'gaussian_kernel',
    'separable_convolve',
]
