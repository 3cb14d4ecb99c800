# -*- coding: utf-8 -*-
"""
Filter Parameters - Explicit, immutable description of one filter run.

``FilterParams`` is a closed variant over ``FilterKind``: every kind
carries exactly the fields it needs and construction rejects the rest.
Aggregator kinds carry an odd ``kernel_size``; the contraharmonic mean adds
its order ``q``; the Gaussian carries a positive ``sigma`` and an optional
odd ``kernel_size``. A ``FilterParams`` value is passed to the stateless
``apply_filter`` / ``FilterPipeline.run`` call in place of any per-call
filter construction by the caller.

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
from dataclasses import dataclass
from typing import Any, Dict, Optional

# denoisekit internal
from denoisekit.exceptions import ValidationError
from denoisekit.image_processing.filters._validation import (
    validate_kernel_size,
    validate_q,
    validate_sigma,
)
from denoisekit.image_processing.filters.gaussian import default_kernel_size
from denoisekit.image_processing.filters.kernel import KernelSpec
from denoisekit.vocabulary import FilterKind

DEFAULT_KERNEL_SIZE = 3
DEFAULT_Q = 1.0
DEFAULT_SIGMA = 1.0


@dataclass(frozen=True)
class FilterParams:
    """Parameters for a single filter run.

    Prefer the per-kind factories (``FilterParams.median(5)``,
    ``FilterParams.gaussian(sigma=2.0)``, ...) or ``from_name`` over the
    raw constructor.

    Parameters
    ----------
    kind : FilterKind
        Which filter to run.
    kernel_size : int, optional
        Odd kernel side length. Required for every kind except
        ``GAUSSIAN``, where ``None`` selects ``ceil(6 * sigma) | 1``.
    q : float, optional
        Contraharmonic order. Required for ``CONTRAHARMONIC_MEAN`` and
        rejected for every other kind.
    sigma : float, optional
        Gaussian standard deviation. Required for ``GAUSSIAN`` and rejected
        for every other kind.

    Raises
    ------
    ValidationError
        If a field is missing, out of range, or does not belong to *kind*.
    """

    kind: FilterKind
    kernel_size: Optional[int] = None
    q: Optional[float] = None
    sigma: Optional[float] = None

    def __post_init__(self) -> None:
        self.validate()

    # -----------------------------------------------------------------
    # Factories
    # -----------------------------------------------------------------
    @classmethod
    def mean(cls, kernel_size: int = DEFAULT_KERNEL_SIZE) -> 'FilterParams':
        return cls(FilterKind.MEAN, kernel_size=kernel_size)

    @classmethod
    def median(cls, kernel_size: int = DEFAULT_KERNEL_SIZE) -> 'FilterParams':
        return cls(FilterKind.MEDIAN, kernel_size=kernel_size)

    @classmethod
    def minimum(cls, kernel_size: int = DEFAULT_KERNEL_SIZE) -> 'FilterParams':
        return cls(FilterKind.MIN, kernel_size=kernel_size)

    @classmethod
    def maximum(cls, kernel_size: int = DEFAULT_KERNEL_SIZE) -> 'FilterParams':
        return cls(FilterKind.MAX, kernel_size=kernel_size)

    @classmethod
    def midpoint(cls, kernel_size: int = DEFAULT_KERNEL_SIZE) -> 'FilterParams':
        return cls(FilterKind.MIDPOINT, kernel_size=kernel_size)

    @classmethod
    def geometric_mean(
        cls, kernel_size: int = DEFAULT_KERNEL_SIZE
    ) -> 'FilterParams':
        return cls(FilterKind.GEOMETRIC_MEAN, kernel_size=kernel_size)

    @classmethod
    def harmonic_mean(
        cls, kernel_size: int = DEFAULT_KERNEL_SIZE
    ) -> 'FilterParams':
        return cls(FilterKind.HARMONIC_MEAN, kernel_size=kernel_size)

    @classmethod
    def contraharmonic_mean(
        cls, kernel_size: int = DEFAULT_KERNEL_SIZE, q: float = DEFAULT_Q
    ) -> 'FilterParams':
        return cls(FilterKind.CONTRAHARMONIC_MEAN, kernel_size=kernel_size, q=q)

    @classmethod
    def gaussian(
        cls, sigma: float = DEFAULT_SIGMA, kernel_size: Optional[int] = None
    ) -> 'FilterParams':
        return cls(FilterKind.GAUSSIAN, kernel_size=kernel_size, sigma=sigma)

    @classmethod
    def from_name(cls, name: str, **kwargs: Any) -> 'FilterParams':
        """Build parameters from a filter name such as ``'median'``.

        Parameters
        ----------
        name : str
            A ``FilterKind`` value: ``'mean'``, ``'median'``, ``'min'``,
            ``'max'``, ``'midpoint'``, ``'geometric'``, ``'harmonic'``,
            ``'contraharmonic'`` or ``'gaussian'``.
        **kwargs
            Factory arguments for that kind (``kernel_size``, ``q``,
            ``sigma``).

        Raises
        ------
        ValidationError
            If *name* is unknown or *kwargs* do not fit the kind.

        Examples
        --------
        >>> FilterParams.from_name('contraharmonic', q=1.5).q
        1.5
        """
        try:
            kind = FilterKind(name)
        except ValueError as exc:
            names = ', '.join(k.value for k in FilterKind)
            raise ValidationError(
                f"Unknown filter {name!r}; expected one of: {names}"
            ) from exc
        factory = getattr(cls, _FACTORIES[kind])
        try:
            return factory(**kwargs)
        except TypeError as exc:
            raise ValidationError(
                f"Invalid parameters for {kind.value!r} filter: {exc}"
            ) from exc

    # -----------------------------------------------------------------
    # Validation and derived values
    # -----------------------------------------------------------------
    def validate(self) -> None:
        """Check that every field fits ``kind``.

        Raises
        ------
        ValidationError
            If a field is missing, invalid, or foreign to ``kind``.
        """
        if not isinstance(self.kind, FilterKind):
            raise ValidationError(
                f"kind must be a FilterKind member, got {self.kind!r}"
            )

        if self.kind is FilterKind.GAUSSIAN:
            if self.q is not None:
                raise ValidationError("q does not apply to the gaussian filter")
            if self.sigma is None:
                raise ValidationError("gaussian filter requires sigma")
            validate_sigma(self.sigma)
            if self.kernel_size is not None:
                validate_kernel_size(self.kernel_size, maximum=None)
            return

        if self.sigma is not None:
            raise ValidationError(
                f"sigma does not apply to the {self.kind.value} filter"
            )
        if self.kernel_size is None:
            raise ValidationError(
                f"{self.kind.value} filter requires kernel_size"
            )
        validate_kernel_size(self.kernel_size)

        if self.kind is FilterKind.CONTRAHARMONIC_MEAN:
            if self.q is None:
                raise ValidationError("contraharmonic filter requires q")
            validate_q(self.q)
        elif self.q is not None:
            raise ValidationError(
                f"q does not apply to the {self.kind.value} filter"
            )

    def kernel(self) -> KernelSpec:
        """Resolved neighbourhood (Gaussian default size applied)."""
        if self.kind is FilterKind.GAUSSIAN:
            size = self.kernel_size
            if size is None:
                size = default_kernel_size(self.sigma)
            return KernelSpec(size, maximum=None)
        return KernelSpec(self.kernel_size)

    def filter_kwargs(self) -> Dict[str, Any]:
        """Constructor keyword arguments for the filter class of ``kind``."""
        kwargs: Dict[str, Any] = {'kernel_size': self.kernel_size}
        if self.kind is FilterKind.GAUSSIAN:
            kwargs['sigma'] = self.sigma
        elif self.kind is FilterKind.CONTRAHARMONIC_MEAN:
            kwargs['q'] = self.q
        return kwargs


_FACTORIES = {
    FilterKind.MEAN: 'mean',
    FilterKind.MEDIAN: 'median',
    FilterKind.MIN: 'minimum',
    FilterKind.MAX: 'maximum',
    FilterKind.MIDPOINT: 'midpoint',
    FilterKind.GEOMETRIC_MEAN: 'geometric_mean',
    FilterKind.HARMONIC_MEAN: 'harmonic_mean',
    FilterKind.CONTRAHARMONIC_MEAN: 'contraharmonic_mean',
    FilterKind.GAUSSIAN: 'gaussian',
}
