# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag decorators.

Provides the ``@processor_version`` class decorator for stamping semantic
version strings on filter classes, and ``@processor_tags`` for declaring
which ``FilterKind`` a class implements and which boundary policy it
samples with. The pipeline uses the tags to map a
``FilterParams`` value onto the class that implements it.

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
from typing import Optional, Type, TypeVar, overload
import importlib.metadata

# denoisekit vocabulary
from denoisekit.vocabulary import BoundaryPolicy, FilterKind

T = TypeVar('T')


@overload
def processor_version(version: str):
    ...

@overload
def processor_version():
    ...

def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a processor version on a filter class.

    Sets ``__processor_version__`` as a class attribute. If a version is
    not provided, it is inferred from the installed package metadata.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Returns
    -------
    Callable
        Class decorator that sets ``__processor_version__`` on the class.

    Examples
    --------
    >>> from denoisekit.image_processing.versioning import processor_version
    >>> from denoisekit.image_processing.base import ImageTransform
    >>>
    >>> @processor_version('1.0.0')
    ... class Identity(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>>
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version(
                    'denoisekit'
                )
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    kind: Optional[FilterKind] = None,
    boundary: Optional[BoundaryPolicy] = None,
    description: Optional[str] = None,
):
    """Class decorator for filter capability metadata.

    Stamps ``__processor_tags__`` on the class with the filter kind,
    boundary policy and description.

    Parameters
    ----------
    kind : FilterKind, optional
        The filter kind the class implements.
    boundary : BoundaryPolicy, optional
        Boundary policy used when sampling past the raster edge.
    description : str, optional
        Short human-readable description of the filter's purpose.

    Raises
    ------
    TypeError
        If *kind* or *boundary* is not a member of the corresponding
        enum.

    Examples
    --------
    >>> from denoisekit.vocabulary import BoundaryPolicy, FilterKind
    >>> @processor_version('1.0.0')
    ... @processor_tags(kind=FilterKind.MEDIAN,
    ...                 boundary=BoundaryPolicy.REFLECT)
    ... class MyMedian(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> MyMedian.__processor_tags__['kind']
    <FilterKind.MEDIAN: 'median'>
    """
    # -- Validate enum types eagerly so typos fail at import time ----------
    if kind is not None and not isinstance(kind, FilterKind):
        raise TypeError(f"kind must be a FilterKind member, got {kind!r}")
    if boundary is not None and not isinstance(boundary, BoundaryPolicy):
        raise TypeError(
            f"boundary must be a BoundaryPolicy member, got {boundary!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'kind': kind,
            'boundary': boundary,
            'description': description,
        }
        return cls
    return decorator
