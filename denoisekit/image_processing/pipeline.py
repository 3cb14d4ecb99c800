# -*- coding: utf-8 -*-
"""
Filter Pipeline - Stateless orchestration of a single filter run.

``apply_filter`` validates a ``FilterParams`` value, builds the matching
filter, acquires an ``ImageBuffer`` snapshot from the source, and returns a
fully populated output buffer. ``FilterPipeline`` wraps the same call with
an optional ``concurrent.futures`` executor so callers that must stay
responsive can ``submit`` a run and collect the result from a ``Future``.
The computation itself is always a plain blocking call; a submitted run
cannot be cancelled once it has started.

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

# Standard library
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional, Type, Union

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.exceptions import ProcessorError, ValidationError
from denoisekit.image_processing.base import ImageTransform
from denoisekit.image_processing.filter_params import FilterParams
from denoisekit.image_processing.filters import (
    ContraharmonicMeanFilter,
    GaussianFilter,
    GeometricMeanFilter,
    HarmonicMeanFilter,
    MaxFilter,
    MeanFilter,
    MedianFilter,
    MidpointFilter,
    MinFilter,
)
from denoisekit.image_processing.raster import ImageBuffer, PixelSource, read_source
from denoisekit.vocabulary import FilterKind

logger = logging.getLogger(__name__)

Source = Union[ImageBuffer, np.ndarray, PixelSource]

FILTER_CLASSES: Dict[FilterKind, Type[ImageTransform]] = {
    cls.__processor_tags__['kind']: cls
    for cls in (
        MeanFilter,
        MedianFilter,
        MinFilter,
        MaxFilter,
        MidpointFilter,
        GeometricMeanFilter,
        HarmonicMeanFilter,
        ContraharmonicMeanFilter,
        GaussianFilter,
    )
}


def build_filter(params: FilterParams) -> ImageTransform:
    """Instantiate the filter described by *params*.

    Parameters
    ----------
    params : FilterParams
        Validated filter parameters.

    Returns
    -------
    ImageTransform
        A new filter instance.

    Raises
    ------
    ValidationError
        If *params* is not a ``FilterParams`` value.
    """
    if not isinstance(params, FilterParams):
        raise ValidationError(
            f"params must be FilterParams, got {type(params).__name__}"
        )
    return FILTER_CLASSES[params.kind](**params.filter_kwargs())


def apply_filter(
    source: Source, params: FilterParams, **kwargs: Any
) -> ImageBuffer:
    """Run one filter over *source* and return a new RGBA8 buffer.

    Steps, in order: validate *params* and build the filter (no pixel work
    happens if this fails), acquire the source pixels, sweep the filter
    into a freshly allocated output buffer with alpha copied verbatim.

    Parameters
    ----------
    source : ImageBuffer, np.ndarray, or PixelSource
        Input raster, or a collaborator that hands one out.
    params : FilterParams
        Which filter to run and with what parameters.
    **kwargs
        Forwarded to the filter's ``apply()``; typically
        ``progress_callback`` or ``workers``.

    Returns
    -------
    ImageBuffer
        Output raster of identical dimensions.

    Raises
    ------
    ValidationError
        If *params* or the source raster are invalid.
    PixelAccessError
        If the source refuses to hand out its pixels.

    Examples
    --------
    >>> out = apply_filter(image, FilterParams.median(5))
    """
    transform = build_filter(params)
    image = read_source(source)
    logger.debug("Applying %r to %dx%d raster", transform,
                 image.width, image.height)
    result = transform.apply(image, **kwargs)
    if not isinstance(result, ImageBuffer):
        raise ProcessorError(
            f"{type(transform).__name__} returned {type(result).__name__}, "
            f"expected ImageBuffer"
        )
    return result


class FilterPipeline:
    """Runs filters synchronously or through a worker pool.

    Parameters
    ----------
    max_workers : int
        Size of the thread pool used by :meth:`submit`. Default 1, which
        serialises submitted runs in submission order.

    Examples
    --------
    >>> with FilterPipeline() as pipeline:
    ...     future = pipeline.submit(image, FilterParams.gaussian(sigma=1.5))
    ...     blurred = future.result()
    """

    def __init__(self, max_workers: int = 1) -> None:
        if (isinstance(max_workers, bool) or not isinstance(max_workers, int)
                or max_workers < 1):
            raise ValidationError(
                f"max_workers must be a positive integer, got {max_workers!r}"
            )
        self.max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None

    def run(
        self, source: Source, params: FilterParams, **kwargs: Any
    ) -> ImageBuffer:
        """Blocking run; see :func:`apply_filter`."""
        return apply_filter(source, params, **kwargs)

    def submit(
        self, source: Source, params: FilterParams, **kwargs: Any
    ) -> 'Future[ImageBuffer]':
        """Schedule a run and return a ``Future`` for its output buffer.

        Parameter validation happens before scheduling, so invalid
        parameters raise ``ValidationError`` here rather than through the
        future. Errors raised while reading or filtering the source are
        delivered by ``Future.result()``.
        """
        build_filter(params)
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix='denoisekit',
            )
        logger.debug("Submitting %s filter run", params.kind.value)
        return self._executor.submit(self.run, source, params, **kwargs)

    def shutdown(self, wait: bool = True) -> None:
        """Release the worker pool, waiting for pending runs by default."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self) -> 'FilterPipeline':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        return f"FilterPipeline(max_workers={self.max_workers})"
