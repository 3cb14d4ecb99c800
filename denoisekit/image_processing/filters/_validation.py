# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared kernel size, sigma, and Q validation.

Provides reusable validation functions for spatial image filters. All filter
classes in this subpackage call these helpers to enforce consistent
constraints on kernel size (odd, >= 1), Gaussian sigma (positive, finite)
and the contraharmonic order Q (finite). Every helper raises before any
pixel is touched.

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
import math
from typing import Optional

# denoisekit internal
from denoisekit.exceptions import ValidationError


MAX_KERNEL_SIZE = 101


def validate_kernel_size(
    kernel_size: int,
    name: str = 'kernel_size',
    minimum: int = 1,
    maximum: Optional[int] = MAX_KERNEL_SIZE,
) -> None:
    """Validate that kernel size is an odd integer within bounds.

    Parameters
    ----------
    kernel_size : int
        The kernel size to validate.
    name : str
        Parameter name for error messages. Default ``'kernel_size'``.
    minimum : int
        Smallest accepted size. Default 1 (the identity kernel).
    maximum : int, optional
        Largest accepted size, or ``None`` for no upper bound.
        Default 101.

    Raises
    ------
    ValidationError
        If ``kernel_size`` is not an integer, is out of bounds, or is even.
    """
    if isinstance(kernel_size, bool) or not isinstance(kernel_size, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(kernel_size).__name__}"
        )
    if kernel_size % 2 == 0:
        raise ValidationError(
            f"{name} must be odd, got {kernel_size}"
        )
    if kernel_size < minimum:
        raise ValidationError(
            f"{name} must be >= {minimum}, got {kernel_size}"
        )
    if maximum is not None and kernel_size > maximum:
        raise ValidationError(
            f"{name} must be <= {maximum}, got {kernel_size}"
        )


def validate_sigma(sigma: float, name: str = 'sigma') -> None:
    """Validate that a Gaussian standard deviation is positive and finite.

    Raises
    ------
    ValidationError
        If ``sigma`` is not a real number, is not finite, or is <= 0.
    """
    if isinstance(sigma, bool) or not isinstance(sigma, (int, float)):
        raise ValidationError(
            f"{name} must be a real number, got {type(sigma).__name__}"
        )
    if not math.isfinite(sigma) or sigma <= 0:
        raise ValidationError(
            f"{name} must be a positive finite number, got {sigma!r}"
        )


def validate_q(q: float, name: str = 'q') -> None:
    """Validate that the contraharmonic order is a finite real number."""
    if isinstance(q, bool) or not isinstance(q, (int, float)):
        raise ValidationError(
            f"{name} must be a real number, got {type(q).__name__}"
        )
    if not math.isfinite(q):
        raise ValidationError(f"{name} must be finite, got {q!r}")
