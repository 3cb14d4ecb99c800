# -*- coding: utf-8 -*-
"""
Image Processing Module - Denoising filters for RGBA8 rasters.

Provides the raster model, processor base classes, the denoising filter
family, and the stateless pipeline that runs one filter over one image.
All filters inherit from ``ImageProcessor`` which provides version
checking and tunable parameter validation.

Sub-modules
-----------
filters/
    Neighbourhood filters -- linear (mean, Gaussian), rank (median, min,
    max, midpoint), and power-mean (geometric, harmonic, contraharmonic).
    All preserve alpha via ``AlphaPreservingMixin``.
raster.py
    ``ImageBuffer`` RGBA8 raster, ``PixelSource`` protocol,
    ``read_source``.
filter_params.py
    ``FilterParams`` closed variant describing one filter run.
pipeline.py
    ``apply_filter``, ``build_filter``, and ``FilterPipeline``.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range``, ``Odd``, ``Desc`` constraint markers for
    tunable parameters via ``Annotated`` type hints.

Key Classes
-----------
Base infrastructure:
    ``ImageProcessor``, ``ImageTransform``, ``AlphaPreservingMixin``,
    ``processor_version``, ``processor_tags``, ``Range``,
    ``Odd``, ``Desc``, ``ParamSpec``

Raster:
    ``ImageBuffer``, ``PixelSource``, ``read_source``

Filters:
    ``MeanFilter``, ``GaussianFilter``, ``MedianFilter``, ``MinFilter``,
    ``MaxFilter``, ``MidpointFilter``, ``GeometricMeanFilter``,
    ``HarmonicMeanFilter``, ``ContraharmonicMeanFilter``

Pipeline:
    ``FilterParams``, ``FilterPipeline``, ``apply_filter``,
    ``build_filter``

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

from denoisekit.image_processing.base import (
    AlphaPreservingMixin,
    ImageProcessor,
    ImageTransform,
)
from denoisekit.image_processing.params import (
    Desc,
    Odd,
    ParamSpec,
    Range,
)
from denoisekit.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from denoisekit.image_processing.raster import (
    ImageBuffer,
    PixelSource,
    read_source,
)
from denoisekit.image_processing.filters import (
    ContraharmonicMeanFilter,
    GaussianFilter,
    GeometricMeanFilter,
    HarmonicMeanFilter,
    KernelSpec,
    MaxFilter,
    MeanFilter,
    MedianFilter,
    MidpointFilter,
    MinFilter,
)
from denoisekit.image_processing.filter_params import FilterParams
from denoisekit.image_processing.pipeline import (
    FilterPipeline,
    apply_filter,
    build_filter,
)

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'AlphaPreservingMixin',
    'processor_version',
    'processor_tags',
    'Range',
    'Odd',
    'Desc',
    'ParamSpec',
    'ImageBuffer',
    'PixelSource',
    'read_source',
    'KernelSpec',
    'MeanFilter',
    'GaussianFilter',
    'MedianFilter',
    'MinFilter',
    'MaxFilter',
    'MidpointFilter',
    'GeometricMeanFilter',
    'HarmonicMeanFilter',
    'ContraharmonicMeanFilter',
    'FilterParams',
    'FilterPipeline',
    'apply_filter',
    'build_filter',
]
