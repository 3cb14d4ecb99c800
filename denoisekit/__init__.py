# -*- coding: utf-8 -*-
"""
denoisekit - Spatial denoising filters for RGBA8 rasters.

A small library of neighbourhood and separable filters (mean, median,
min, max, midpoint, geometric, harmonic, contraharmonic, Gaussian) that
transform the colour channels of an externally decoded RGBA8 raster and
copy alpha through unchanged.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from denoisekit.exceptions import (
    DenoiseError,
    ValidationError,
    PixelAccessError,
    ProcessorError,
)
from denoisekit.vocabulary import (
    FilterKind,
    BoundaryPolicy,
)

__all__ = [
    'DenoiseError',
    'ValidationError',
    'PixelAccessError',
    'ProcessorError',
    'FilterKind',
    'BoundaryPolicy',
]
