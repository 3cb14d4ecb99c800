# -*- coding: utf-8 -*-
"""
denoisekit Exception Hierarchy - Domain-specific exceptions for filter runs.

Provides a small exception hierarchy that lets callers catch filter-engine
errors distinctly from Python built-in exceptions. All denoisekit exceptions
subclass both ``DenoiseError`` and the appropriate built-in exception for
backward compatibility.

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


class DenoiseError(Exception):
    """Base exception for all denoisekit errors."""


class ValidationError(DenoiseError, ValueError):
    """Invalid input raster, parameters, or configuration.

    Raised for even or out-of-range kernel sizes, non-positive sigma,
    non-finite contraharmonic order, raster shape/dtype mismatches, and
    other input validation failures. Always raised before any pixel is
    processed.
    """


class PixelAccessError(DenoiseError, PermissionError):
    """Source raster pixels could not be read.

    Raised when a pixel source refuses to hand out readable pixel data
    (for example a cross-origin restriction on the image that backs it).
    Every filter kind propagates this error; none degrades to an
    approximate result.
    """


class ProcessorError(DenoiseError, RuntimeError):
    """Algorithm or processing failure during apply().

    Raised when a filter encounters a non-recoverable error during
    execution (not an input validation issue).
    """
