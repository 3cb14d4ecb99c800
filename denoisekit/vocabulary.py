# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the denoisekit framework.

Defines the single source of truth for controlled vocabularies used across
the filter engine: filter kinds and boundary policies. Filter classes, ``FilterParams``, and the pipeline all import
from this module so that names are guaranteed consistent and typo-free.

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

from enum import Enum


class FilterKind(Enum):
    """Neighbourhood filter kinds supported by the engine.

    Values double as the short names accepted by
    ``FilterParams.from_name``.
    """

    MEAN = "mean"
    MEDIAN = "median"
    MIN = "min"
    MAX = "max"
    MIDPOINT = "midpoint"
    GEOMETRIC_MEAN = "geometric"
    HARMONIC_MEAN = "harmonic"
    CONTRAHARMONIC_MEAN = "contraharmonic"
    GAUSSIAN = "gaussian"


class BoundaryPolicy(Enum):
    """Out-of-range coordinate handling.

    ``REFLECT`` mirrors the coordinate back in range without repeating
    the edge sample, then clamps. ``CLAMP`` replicates the nearest edge
    sample.
    """

    REFLECT = "reflect"
    CLAMP = "clamp"

