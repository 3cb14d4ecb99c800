# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative filter parameters via typing.Annotated.

Provides constraint marker types (``Range``, ``Odd``, ``Desc``)
for use inside ``typing.Annotated`` annotations on ``ImageProcessor``
subclasses, plus the ``ParamSpec`` introspection class and the
collection/init-generation utilities consumed by
``ImageProcessor.__init_subclass__``.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated, Optional
    from denoisekit.image_processing.params import Range, Odd, Desc

    class MyFilter(ImageTransform):
        kernel_size: Annotated[int, Range(min=1, max=101), Odd(),
                               Desc('Square kernel side length')] = 3
        size: Annotated[Optional[int], Odd(), Desc('Explicit size')] = None

``Optional[X]`` annotations produce a nullable spec: ``None`` is accepted
and skips the remaining constraint checks. Parameters are collected into
``cls.__param_specs__`` at class definition time. An ``__init__`` is
auto-generated unless the class defines its own.

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
import inspect
import math
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

# denoisekit internal
from denoisekit.exceptions import ValidationError


# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types.

    Any ``Annotated`` class-body field whose metadata includes at least one
    ``ParamMeta`` subclass instance is treated as a tunable parameter.
    """


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value (inclusive).
    max : int or float, optional
        Maximum allowed value (inclusive).
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        return f"Range({', '.join(parts)})"


class Odd(ParamMeta):
    """Integer oddness constraint for kernel side lengths."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Odd()"


class Desc(ParamMeta):
    """Human-readable parameter description.

    Parameters
    ----------
    text : str
        Description text shown in tooling and documentation.
    """

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec - processed introspection data class
# =====================================================================

_SENTINEL = object()


class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Built automatically from ``Annotated`` declarations by
    ``collect_param_specs``.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type (``int`` or ``float``).
    default : Any
        Default value, or ``None`` if the parameter is required.
    description : str
        Human-readable description.
    min_value : int, float, or None
        Inclusive minimum (from ``Range``).
    max_value : int, float, or None
        Inclusive maximum (from ``Range``).
    odd : bool
        Whether the value must be an odd integer (from ``Odd``).
    nullable : bool
        Whether ``None`` is accepted (from an ``Optional[...]`` hint).
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'odd', 'nullable',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str,
        min_value: Optional[Union[int, float]],
        max_value: Optional[Union[int, float]],
        odd: bool = False,
        nullable: bool = False,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.odd = odd
        self.nullable = nullable

    @property
    def required(self) -> bool:
        """Whether this parameter is required (has no default)."""
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Validate *value* against this spec's type and constraints.

        * ``int`` is accepted when ``param_type`` is ``float``; ``bool``
          is never accepted for numeric parameters.
        * Float values must be finite.
        * Range bounds are inclusive.
        * ``None`` passes when the spec is nullable.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValidationError
            If *value* violates range, oddness, or finiteness
            constraints.
        """
        if value is None and self.nullable:
            return

        # -- type check --
        if self.param_type in (int, float) and isinstance(value, bool):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got bool"
            )
        if self.param_type is float:
            if not isinstance(value, (int, float)):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
            if not math.isfinite(value):
                raise ValidationError(
                    f"Parameter '{self.name}' must be finite, got {value!r}"
                )
        elif self.param_type is not object:
            if not isinstance(value, self.param_type):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )

        # -- range check --
        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )

        # -- oddness check --
        if self.odd and value % 2 == 0:
            raise ValidationError(
                f"Parameter '{self.name}' must be odd, got {value!r}"
            )

    def __repr__(self) -> str:
        parts = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            parts += f", default={self.default!r}"
        if self.min_value is not None:
            parts += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            parts += f", max_value={self.max_value!r}"
        if self.odd:
            parts += ", odd=True"
        if self.nullable:
            parts += ", nullable=True"
        return parts + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def _unwrap_optional(hint: Any) -> Tuple[Any, bool]:
    """Split ``Optional[X]`` into ``(X, True)``; other hints pass through."""
    if get_origin(hint) is Union:
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1 and len(get_args(hint)) == 2:
            return args[0], True
    return hint, False


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` type hints on *cls* into a tuple of ``ParamSpec``.

    Only fields whose ``Annotated`` metadata includes at least one
    ``ParamMeta`` subclass instance are collected.  Fields are ordered by
    MRO (parent-first, preserving declaration order within each class).
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except Exception:
        return ()

    seen: set = set()
    ordered_names: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name not in seen and name in hints:
                seen.add(name)
                ordered_names.append(name)

    specs: list = []
    for name in ordered_names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue

        base_type, nullable = _unwrap_optional(hint.__args__[0])
        metadata = hint.__metadata__

        param_metas = [m for m in metadata if isinstance(m, ParamMeta)]
        if not param_metas:
            continue

        range_meta: Optional[Range] = None
        desc_meta: Optional[Desc] = None
        odd = False
        for m in param_metas:
            if isinstance(m, Range):
                range_meta = m
            elif isinstance(m, Desc):
                desc_meta = m
            elif isinstance(m, Odd):
                odd = True

        default = getattr(cls, name, _SENTINEL)
        has_default = default is not _SENTINEL

        specs.append(ParamSpec(
            name=name,
            param_type=base_type,
            default=default if has_default else None,
            has_default=has_default,
            description=desc_meta.text if desc_meta else '',
            min_value=range_meta.min if range_meta else None,
            max_value=range_meta.max if range_meta else None,
            odd=odd,
            nullable=nullable,
        ))

    return tuple(specs)


# =====================================================================
# __init__ generation
# =====================================================================

def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build an ``__init__`` from *param_specs* with a proper signature.

    The generated function:

    1. Accepts keyword-only arguments matching each spec.
    2. Falls back to the spec default when a kwarg is absent.
    3. Validates every value via ``spec.validate(value)``.
    4. Sets ``self.<name> = value``.
    5. Calls ``self.__post_init__()`` if the class defines one.
    """
    _specs = param_specs

    def __init__(self, **kwargs):
        expected = {s.name for s in _specs}
        unexpected = set(kwargs) - expected
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )

        for spec in _specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif spec._has_default:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            object.__setattr__(self, spec.name, value)

        if hasattr(self, '__post_init__'):
            self.__post_init__()

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in _specs:
        if spec._has_default:
            params.append(inspect.Parameter(
                spec.name,
                inspect.Parameter.KEYWORD_ONLY,
                default=spec.default,
            ))
        else:
            params.append(inspect.Parameter(
                spec.name,
                inspect.Parameter.KEYWORD_ONLY,
            ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'

    return __init__
