# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for raster filters.

Defines the ``ImageProcessor`` common base class for all filters, the
``ImageTransform`` ABC for dense raster transforms, and the
``AlphaPreservingMixin`` that splits an RGBA8 raster into colour and alpha,
runs the subclass's colour-only computation into a freshly allocated output
raster, and copies alpha through verbatim. ``ImageProcessor`` provides
version checking at first instantiation and ``typing.Annotated``-based
tunable parameter declarations with automatic ``__init__`` generation and
runtime resolution through ``**kwargs``.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple, Union

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.exceptions import ProcessorError
from denoisekit.image_processing.params import ParamSpec, collect_param_specs, _make_init
from denoisekit.image_processing.raster import ALPHA, ImageBuffer, as_rgba_pixels

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    Provides two cross-cutting capabilities:

    **Version checking**: Concrete subclasses that do not declare a processor
    version via ``@processor_version('x.y.z')`` will trigger a
    ``UserWarning`` at first instantiation.  The check uses ``__new__``
    rather than ``__init_subclass__`` so that decorators have been applied
    by the time the check runs.

    **Tunable parameter flow**: Subclasses declare tunable parameters as
    ``typing.Annotated`` class-body fields using constraint markers from
    :mod:`denoisekit.image_processing.params` (``Range``, ``Odd``,
    ``Desc``). ``__init_subclass__`` collects these into
    ``__param_specs__`` and auto-generates an ``__init__`` (unless the
    subclass defines its own). At runtime, ``_resolve_params(kwargs)``
    merges instance defaults with keyword-argument overrides and validates
    constraints.
    """

    # Track which classes have been checked to warn only once per class.
    _version_warned_classes: set = set()

    #: Tuple of :class:`~denoisekit.image_processing.params.ParamSpec` built
    #: automatically by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        # Auto-generate __init__ only when the subclass has Annotated
        # params and did NOT define its own __init__.
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    # -----------------------------------------------------------------
    # Tunable parameter resolution
    # -----------------------------------------------------------------
    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance defaults with runtime *kwargs* overrides.

        For each declared parameter in ``__param_specs__``:

        1. If present in *kwargs*, use the *kwargs* value.
        2. Otherwise use the instance attribute (``self.<name>``).

        Every resolved value is validated against its spec's type, range,
        and oddness constraints.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments.  May contain non-param keys
            (e.g. ``progress_callback``); those are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValidationError
            If a value violates a constraint.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            else:
                value = getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(
        self, kwargs: Dict[str, Any], fraction: float
    ) -> None:
        """Report progress to an optional callback.

        If the caller provided a ``progress_callback`` keyword argument,
        it is called with the current fraction (0.0 to 1.0). If no
        callback is provided, this is a no-op.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            The keyword arguments passed to the processor method.
        fraction : float
            Progress fraction in [0.0, 1.0].
        """
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))

    def __repr__(self) -> str:
        params = ', '.join(
            f"{spec.name}={getattr(self, spec.name)!r}"
            for spec in type(self).__param_specs__
        )
        return f"{type(self).__name__}({params})"


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image transforms.

    Provides interface for transforms that take a source raster and
    produce a new raster of the same shape. Subclasses implement
    ``apply``.
    """

    @abstractmethod
    def apply(self, source: Any, **kwargs: Any) -> Any:
        """
        Apply the transform to a source raster.

        Parameters
        ----------
        source : np.ndarray or ImageBuffer
            Input raster.

        Returns
        -------
        np.ndarray or ImageBuffer
            Transformed raster.
        """
        ...


class AlphaPreservingMixin:
    """Mixin that runs a colour-only transform on an RGBA8 raster.

    When mixed into an ``ImageTransform`` subclass, this overrides
    ``apply()`` to accept a ``(rows, cols, 4)`` uint8 array or an
    ``ImageBuffer``, hand the ``(rows, cols, 3)`` colour planes to the
    subclass's ``_apply_rgb()``, and assemble a new output raster whose
    alpha channel is copied unchanged from the input. The input raster is
    never written to.

    Usage
    -----
    Subclasses should inherit from both the mixin and ``ImageTransform``::

        class MyFilter(AlphaPreservingMixin, ImageTransform):
            def _apply_rgb(self, rgb, **kwargs):
                # (rows, cols, 3) uint8 -> (rows, cols, 3) uint8
                ...
    """

    def apply(
        self, source: Union[np.ndarray, ImageBuffer], **kwargs: Any
    ) -> Union[np.ndarray, ImageBuffer]:
        """Apply the transform, preserving alpha and input type.

        Parameters
        ----------
        source : np.ndarray or ImageBuffer
            ``(rows, cols, 4)`` uint8 raster or ``ImageBuffer``.
        **kwargs
            Tunable parameter overrides and ``progress_callback``.

        Returns
        -------
        np.ndarray or ImageBuffer
            New raster of the same type and shape as *source*.

        Raises
        ------
        ValidationError
            If *source* is not an RGBA8 raster or a parameter is invalid.
        """
        pixels = as_rgba_pixels(source)
        rgb = pixels[..., :ALPHA]

        filtered = self._apply_rgb(rgb, **kwargs)
        if filtered.shape != rgb.shape:
            raise ProcessorError(
                f"{type(self).__name__} produced shape {filtered.shape}, "
                f"expected {rgb.shape}"
            )

        output = np.empty_like(pixels)
        output[..., :ALPHA] = filtered
        output[..., ALPHA] = pixels[..., ALPHA]

        if isinstance(source, ImageBuffer):
            return ImageBuffer.from_array(output)
        return output

    @abstractmethod
    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Compute the filtered colour planes.

        Parameters
        ----------
        rgb : np.ndarray
            ``(rows, cols, 3)`` uint8 colour planes (read-only view).

        Returns
        -------
        np.ndarray
            ``(rows, cols, 3)`` uint8 filtered colour planes.
        """
        ...
