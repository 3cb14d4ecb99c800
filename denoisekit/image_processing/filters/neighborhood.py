# -*- coding: utf-8 -*-
"""
Neighbourhood Sampler - Reflect-padded square windows over RGB planes.

``ReflectedNeighborhood`` pads the colour planes of a raster once, using
the reflect boundary policy, so that every ``size x size`` window centred
on an in-range pixel can be read as a plain slice. Samples are returned in
row-major window order (``dy`` outer, ``dx`` inner), one column per colour
channel. ``sweep_rows`` drives an ``Aggregator`` over every pixel in
row-major order, optionally partitioning rows across a thread pool, and
reports progress in roughly 10 % steps. ``NeighborhoodFilter`` is the
shared base of every filter built from an aggregator.

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
import logging
from abc import abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Annotated, Any, Callable, Dict, List, Optional

# Third-party
import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

# denoisekit internal
from denoisekit.image_processing.base import AlphaPreservingMixin, ImageTransform
from denoisekit.image_processing.params import Desc, Odd, Range
from denoisekit.image_processing.filters._validation import MAX_KERNEL_SIZE
from denoisekit.image_processing.filters.aggregators import Aggregator
from denoisekit.image_processing.filters.boundary import padded_indices
from denoisekit.image_processing.filters.kernel import KernelSpec
from denoisekit.vocabulary import BoundaryPolicy

logger = logging.getLogger(__name__)

PROGRESS_STEPS = 10

# Upper bound on samples materialised per aggregator call.
_MAX_BLOCK_SAMPLES = 1 << 21


class ReflectedNeighborhood:
    """Reflect-padded view of ``(rows, cols, channels)`` colour planes.

    Parameters
    ----------
    planes : np.ndarray
        ``(rows, cols, channels)`` uint8 array. Not modified.
    kernel : KernelSpec
        Neighbourhood shape.

    Examples
    --------
    >>> rgb = np.arange(27, dtype=np.uint8).reshape(3, 3, 3)
    >>> nb = ReflectedNeighborhood(rgb, KernelSpec(3))
    >>> nb.samples_at(0, 0).shape
    (9, 3)
    """

    def __init__(self, planes: np.ndarray, kernel: KernelSpec) -> None:
        if planes.ndim != 3:
            raise ValueError(
                f"planes must be (rows, cols, channels), got {planes.shape}"
            )
        self.kernel = kernel
        self.rows, self.cols, self.channels = planes.shape
        r = kernel.radius
        row_idx = padded_indices(self.rows, r, BoundaryPolicy.REFLECT)
        col_idx = padded_indices(self.cols, r, BoundaryPolicy.REFLECT)
        self._padded = np.take(np.take(planes, row_idx, axis=0),
                               col_idx, axis=1)

    def samples_at(self, x: int, y: int) -> np.ndarray:
        """All samples of the window centred on pixel ``(x, y)``.

        Returns
        -------
        np.ndarray
            ``(size * size, channels)`` uint8 array.
        """
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.cols}x{self.rows} raster"
            )
        size = self.kernel.size
        window = self._padded[y:y + size, x:x + size]
        return window.reshape(-1, self.channels)

    def row_samples(
        self, y: int, start: int = 0, stop: Optional[int] = None
    ) -> np.ndarray:
        """Samples of every window centred on row *y*, columns ``[start, stop)``.

        Returns
        -------
        np.ndarray
            ``(size * size, stop - start, channels)`` uint8 array; axis 0
            runs over the window in the same order as :meth:`samples_at`.
        """
        if stop is None:
            stop = self.cols
        size = self.kernel.size
        band = self._padded[y:y + size, start:stop + size - 1]
        # (size, width, channels, size): last axis is dx
        windows = sliding_window_view(band, size, axis=1)
        return windows.transpose(0, 3, 1, 2).reshape(
            size * size, stop - start, self.channels
        )


def _row_chunks(rows: int, workers: int) -> List[range]:
    count = min(rows, max(PROGRESS_STEPS, workers))
    bounds = np.linspace(0, rows, count + 1).round().astype(int)
    return [range(a, b) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]


def sweep_rows(
    planes: np.ndarray,
    kernel: KernelSpec,
    aggregator: Aggregator,
    workers: int = 1,
    progress: Optional[Callable[[float], None]] = None,
) -> np.ndarray:
    """Apply *aggregator* to the reflected neighbourhood of every pixel.

    Rows are independent, so with ``workers > 1`` contiguous row blocks are
    processed on a ``ThreadPoolExecutor``. The result is identical to the
    serial sweep and is only returned once every row is written.

    Parameters
    ----------
    planes : np.ndarray
        ``(rows, cols, channels)`` uint8 colour planes.
    kernel : KernelSpec
        Neighbourhood shape.
    aggregator : Aggregator
        Per-channel reduction over each neighbourhood.
    workers : int
        Number of worker threads. Default 1 (serial).
    progress : callable, optional
        Called with the completed fraction after each row block.

    Returns
    -------
    np.ndarray
        ``(rows, cols, channels)`` uint8 output planes.
    """
    neighborhood = ReflectedNeighborhood(planes, kernel)
    output = np.empty_like(planes)
    rows, cols = neighborhood.rows, neighborhood.cols
    block = max(1, _MAX_BLOCK_SAMPLES // (kernel.area * neighborhood.channels))

    def run_chunk(chunk: range) -> None:
        for y in chunk:
            for start in range(0, cols, block):
                stop = min(start + block, cols)
                output[y, start:stop] = aggregator.reduce(
                    neighborhood.row_samples(y, start, stop)
                )

    chunks = _row_chunks(rows, workers)
    logger.debug("%s sweep: %dx%d, kernel %d, %d row blocks, %d workers",
                 type(aggregator).__name__, cols, rows, kernel.size,
                 len(chunks), workers)

    def report(done: int) -> None:
        fraction = done / len(chunks)
        logger.debug("%s sweep %.0f%% complete",
                     type(aggregator).__name__, fraction * 100)
        if progress is not None:
            progress(fraction)

    if workers > 1 and len(chunks) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for done, _ in enumerate(pool.map(run_chunk, chunks), start=1):
                report(done)
    else:
        for done, chunk in enumerate(chunks, start=1):
            run_chunk(chunk)
            report(done)

    return output


class NeighborhoodFilter(AlphaPreservingMixin, ImageTransform):
    """Base for filters that aggregate a reflected square neighbourhood.

    Subclasses supply the per-channel reduction via ``_make_aggregator``;
    validation, the row sweep, progress reporting and alpha handling are
    shared.

    Parameters
    ----------
    kernel_size : int
        Square kernel side length in pixels. Must be odd, 1 to 101.
        Default is 3.
    workers : int
        Worker threads used for the row sweep. Default is 1.
    """

    kernel_size: Annotated[int, Range(min=1, max=MAX_KERNEL_SIZE), Odd(),
                           Desc('Square kernel side length (odd)')] = 3
    workers: Annotated[int, Range(min=1, max=64),
                       Desc('Worker threads for the row sweep')] = 1

    @abstractmethod
    def _make_aggregator(self, params: Dict[str, Any]) -> Aggregator:
        """Build the aggregator for one call from resolved *params*."""
        ...

    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        kernel = KernelSpec(params['kernel_size'])
        aggregator = self._make_aggregator(params)
        return sweep_rows(
            rgb, kernel, aggregator,
            workers=params['workers'],
            progress=lambda fraction: self._report_progress(kwargs, fraction),
        )
