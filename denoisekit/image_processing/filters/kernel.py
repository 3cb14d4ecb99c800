# -*- coding: utf-8 -*-
"""
Kernel Specification - Square odd-sized neighbourhood description.

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
from dataclasses import dataclass, field
from typing import Optional

# denoisekit internal
from denoisekit.image_processing.filters._validation import (
    MAX_KERNEL_SIZE,
    validate_kernel_size,
)


@dataclass(frozen=True)
class KernelSpec:
    """Square neighbourhood of odd side length ``size``.

    Size 1 is the degenerate identity neighbourhood. Even sizes are
    rejected before any pixel is processed.

    Parameters
    ----------
    size : int
        Odd side length >= 1.
    maximum : int, optional
        Upper bound on ``size``; ``None`` disables the bound. Not part
        of equality or hashing.

    Raises
    ------
    ValidationError
        If ``size`` is not an odd integer within bounds.
    """

    size: int
    maximum: Optional[int] = field(default=MAX_KERNEL_SIZE, compare=False,
                                   repr=False)

    def __post_init__(self) -> None:
        validate_kernel_size(self.size, maximum=self.maximum)

    @property
    def radius(self) -> int:
        """Half-width ``(size - 1) // 2``."""
        return (self.size - 1) // 2

    @property
    def area(self) -> int:
        """Number of samples ``size * size`` in the neighbourhood."""
        return self.size * self.size
