# -*- coding: utf-8 -*-
"""
Neighbourhood Aggregators - Per-channel reductions over kernel samples.

Each ``Aggregator`` reduces the ``N = size * size`` samples of a
neighbourhood to one 8-bit value per colour channel. Aggregators are
vectorised over a row of windows: ``reduce`` takes an
``(N, width, channels)`` uint8 array and returns ``(width, channels)``
uint8. Rounding is half-up (``floor(x + 0.5)``) and every result is clamped
into ``[0, 255]``.

- ``ArithmeticMean``: ``round(sum / N)`` in exact integer arithmetic
- ``Minimum`` / ``Maximum``: channel-wise extremum
- ``Midpoint``: ``round((min + max) / 2)``
- ``Median``: order statistic of rank ``N // 2 + 1`` from a 256-bin
  histogram, 255 when the rank is never reached
- ``GeometricMean``: ``round(exp(sum(log(s + eps)) / N))``
- ``HarmonicMean``: ``round(N / sum(1 / (s + eps)))``
- ``ContraharmonicMean``: ``round(sum((s + eps)**(Q+1)) /
  (sum((s + eps)**Q) + eps))``

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
from abc import ABC, abstractmethod

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.image_processing.filters._validation import validate_q

EPSILON = 1e-10
LEVELS = 256


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round half-up, i.e. ``floor(values + 0.5)``."""
    return np.floor(values + 0.5)


def to_uint8(values: np.ndarray) -> np.ndarray:
    """Round half-up and clamp float results into uint8; NaN becomes 0."""
    rounded = round_half_up(values)
    rounded = np.where(np.isnan(rounded), 0.0, rounded)
    return np.clip(rounded, 0, LEVELS - 1).astype(np.uint8)


class Aggregator(ABC):
    """Reduces neighbourhood samples to one value per channel."""

    @abstractmethod
    def reduce(self, samples: np.ndarray) -> np.ndarray:
        """Reduce a row of neighbourhoods.

        Parameters
        ----------
        samples : np.ndarray
            ``(N, width, channels)`` uint8 samples, one window per column.

        Returns
        -------
        np.ndarray
            ``(width, channels)`` uint8.
        """
        ...

    def reduce_window(self, samples: np.ndarray) -> np.ndarray:
        """Reduce a single ``(N, channels)`` neighbourhood to ``(channels,)``."""
        samples = np.asarray(samples, dtype=np.uint8)
        return self.reduce(samples[:, np.newaxis, :])[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ArithmeticMean(Aggregator):
    """Rounded arithmetic mean."""

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        n = samples.shape[0]
        sums = samples.sum(axis=0, dtype=np.int64)
        # floor(sums / n + 0.5) without float error
        return ((2 * sums + n) // (2 * n)).astype(np.uint8)


class Minimum(Aggregator):
    """Channel-wise minimum."""

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        return samples.min(axis=0)


class Maximum(Aggregator):
    """Channel-wise maximum."""

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        return samples.max(axis=0)


class Midpoint(Aggregator):
    """Rounded mean of the channel-wise minimum and maximum."""

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        lo = samples.min(axis=0).astype(np.int32)
        hi = samples.max(axis=0).astype(np.int32)
        return ((lo + hi + 1) // 2).astype(np.uint8)


class Median(Aggregator):
    """Histogram median.

    Builds a 256-bin histogram per output column and channel and returns
    the first level whose cumulative count reaches ``N // 2 + 1``. For odd
    ``N`` this is the exact middle order statistic.
    """

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        n, width, channels = samples.shape
        rank = n // 2 + 1
        cells = width * channels
        flat = samples.reshape(n, cells).astype(np.intp) * cells
        flat += np.arange(cells, dtype=np.intp)
        counts = np.bincount(flat.ravel(), minlength=LEVELS * cells)
        cumulative = counts.reshape(LEVELS, cells).cumsum(axis=0)
        reached = cumulative >= rank
        level = np.where(reached.any(axis=0), reached.argmax(axis=0),
                         LEVELS - 1)
        return level.astype(np.uint8).reshape(width, channels)


class GeometricMean(Aggregator):
    """Rounded geometric mean, accumulated in the log domain."""

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        n = samples.shape[0]
        logs = np.log(samples.astype(np.float64) + EPSILON).sum(axis=0)
        return to_uint8(np.exp(logs / n))


class HarmonicMean(Aggregator):
    """Rounded harmonic mean."""

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        n = samples.shape[0]
        inverse = (1.0 / (samples.astype(np.float64) + EPSILON)).sum(axis=0)
        return to_uint8(n / inverse)


class ContraharmonicMean(Aggregator):
    """Contraharmonic mean of order ``q``.

    ``q > 0`` suppresses dark (pepper) outliers, ``q < 0`` suppresses
    bright (salt) outliers. ``q = 0`` reduces to the arithmetic mean and
    ``q = -1`` to the harmonic mean.

    Parameters
    ----------
    q : float
        Filter order. Default 1.0.
    """

    def __init__(self, q: float = 1.0) -> None:
        validate_q(q)
        self.q = float(q)

    def reduce(self, samples: np.ndarray) -> np.ndarray:
        shifted = samples.astype(np.float64) + EPSILON
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            numerator = np.power(shifted, self.q + 1.0).sum(axis=0)
            denominator = np.power(shifted, self.q).sum(axis=0) + EPSILON
            return to_uint8(numerator / denominator)

    def __repr__(self) -> str:
        return f"ContraharmonicMean(q={self.q!r})"
