# -*- coding: utf-8 -*-
"""
Boundary Policies - Map out-of-range sample coordinates back into a raster.

Two policies are used by the filters in this subpackage:

- **Reflect** (all neighbourhood aggregators): a coordinate ``c < 0`` maps
  to ``|c|``; a coordinate ``c >= n`` maps to ``n - 1 - (c - n + 1)``; the
  result is then clamped into ``[0, n - 1]``. Only a single reflection is
  applied, so for kernels whose radius exceeds the raster dimension the
  result approximates, rather than reproduces, infinite mirroring.
- **Clamp** (Gaussian convolution): a coordinate maps to the nearest
  in-range coordinate (edge replication).

Each policy is available as a scalar function and as a vectorised function
over integer arrays.

Dependencies
------------
numpy

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
from typing import Callable, Dict

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.vocabulary import BoundaryPolicy


def reflect_index(c: int, n: int) -> int:
    """Reflect coordinate *c* into ``[0, n - 1]``.

    Parameters
    ----------
    c : int
        Sample coordinate, possibly outside the raster.
    n : int
        Raster dimension along the sampled axis. Must be >= 1.

    Returns
    -------
    int

    Examples
    --------
    >>> reflect_index(-1, 5), reflect_index(5, 5), reflect_index(-9, 5)
    (1, 3, 0)
    """
    if c < 0:
        c = -c
    if c >= n:
        c = 2 * n - 2 - c
    return min(max(c, 0), n - 1)


def clamp_index(c: int, n: int) -> int:
    """Clamp coordinate *c* into ``[0, n - 1]``."""
    return min(max(c, 0), n - 1)


def reflect_indices(coords: np.ndarray, n: int) -> np.ndarray:
    """Vectorised :func:`reflect_index` over an integer array."""
    coords = np.asarray(coords, dtype=np.intp)
    out = np.where(coords < 0, -coords, coords)
    out = np.where(out >= n, 2 * n - 2 - out, out)
    return np.clip(out, 0, n - 1)


def clamp_indices(coords: np.ndarray, n: int) -> np.ndarray:
    """Vectorised :func:`clamp_index` over an integer array."""
    return np.clip(np.asarray(coords, dtype=np.intp), 0, n - 1)


_INDEX_FUNCS: Dict[BoundaryPolicy, Callable[[np.ndarray, int], np.ndarray]] = {
    BoundaryPolicy.REFLECT: reflect_indices,
    BoundaryPolicy.CLAMP: clamp_indices,
}


def padded_indices(n: int, radius: int, policy: BoundaryPolicy) -> np.ndarray:
    """Source indices for an axis of length *n* padded by *radius* each side.

    Entry ``i`` of the result is the in-range coordinate sampled for padded
    position ``i``, i.e. for raster coordinate ``i - radius``.

    Parameters
    ----------
    n : int
        Axis length.
    radius : int
        Padding on each side.
    policy : BoundaryPolicy
        Boundary policy used to map out-of-range coordinates.

    Returns
    -------
    np.ndarray
        1D ``intp`` array of length ``n + 2 * radius``.
    """
    coords = np.arange(-radius, n + radius, dtype=np.intp)
    return _INDEX_FUNCS[policy](coords, n)
