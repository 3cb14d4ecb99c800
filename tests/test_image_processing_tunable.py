# -*- coding: utf-8 -*-
"""
Annotated Tunable Parameter Tests.

Tests for the typing.Annotated-based filter parameter system: constraint
markers (Range, Odd, Desc), ParamSpec validation including
oddness, finiteness and nullable specs, __init_subclass__ collection, the
auto-generated __init__, and _resolve_params runtime resolution.

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

import inspect
from typing import Annotated, Optional

import numpy as np
import pytest

from denoisekit.exceptions import ValidationError
from denoisekit.image_processing.base import (
    AlphaPreservingMixin,
    ImageProcessor,
    ImageTransform,
)
from denoisekit.image_processing.params import (
    Desc,
    Odd,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from denoisekit.image_processing.versioning import processor_version


def _spec(param_type=int, default=3, min_value=None, max_value=None,
          odd=False, nullable=False):
    return ParamSpec('kernel_size', param_type, default, True, '',
                     min_value, max_value, odd=odd, nullable=nullable)


# ---------------------------------------------------------------------------
# Constraint markers
# ---------------------------------------------------------------------------

class TestMarkers:
    """Test constraint marker construction."""

    def test_range(self):
        r = Range(min=1, max=101)
        assert (r.min, r.max) == (1, 101)
        assert Range().min is None
        assert 'max=101' in repr(r)

    def test_desc(self):
        assert Desc('Square kernel side length').text == \
            'Square kernel side length'

    def test_marker_set(self):
        """Only the markers filters declare are provided."""
        names = {cls.__name__ for cls in ParamMeta.__subclasses__()}
        assert names == {'Range', 'Odd', 'Desc'}

    @pytest.mark.parametrize('marker', [Range(), Odd(), Desc('d')])
    def test_is_param_meta(self, marker):
        assert isinstance(marker, ParamMeta)


# ---------------------------------------------------------------------------
# ParamSpec.validate
# ---------------------------------------------------------------------------

class TestParamSpecValidate:
    """Test ParamSpec type and constraint validation."""

    def test_range_inclusive(self):
        spec = _spec(min_value=1, max_value=101)
        spec.validate(1)
        spec.validate(101)
        with pytest.raises(ValidationError, match="below minimum"):
            spec.validate(0)
        with pytest.raises(ValidationError, match="above maximum"):
            spec.validate(103)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            _spec(max_value=5).validate(7)

    def test_odd(self):
        spec = _spec(odd=True)
        spec.validate(5)
        with pytest.raises(ValidationError, match="must be odd"):
            spec.validate(4)

    def test_bool_rejected_for_int(self):
        with pytest.raises(TypeError, match="got bool"):
            _spec().validate(True)

    def test_float_rejected_for_int(self):
        with pytest.raises(TypeError, match="kernel_size"):
            _spec().validate(3.0)

    def test_int_accepted_as_float(self):
        _spec(param_type=float, default=1.0).validate(2)

    @pytest.mark.parametrize('value', [float('nan'), float('inf'), -float('inf')])
    def test_float_must_be_finite(self, value):
        with pytest.raises(ValidationError, match="finite"):
            _spec(param_type=float, default=1.0).validate(value)

    def test_nullable_accepts_none(self):
        spec = _spec(default=None, odd=True, nullable=True)
        spec.validate(None)
        with pytest.raises(ValidationError, match="odd"):
            spec.validate(6)

    def test_none_rejected_when_not_nullable(self):
        with pytest.raises(TypeError):
            _spec().validate(None)

    def test_repr(self):
        r = repr(_spec(min_value=1, odd=True, nullable=True))
        assert 'default=3' in r
        assert 'min_value=1' in r
        assert 'odd=True' in r
        assert 'nullable=True' in r

    def test_required(self):
        spec = ParamSpec('sigma', float, None, False, '', None, None)
        assert spec.required is True
        assert 'default=' not in repr(spec)


# ---------------------------------------------------------------------------
# collect_param_specs
# ---------------------------------------------------------------------------

class TestCollectParamSpecs:
    """Test annotation collection from Annotated class-body fields."""

    def test_plain_annotations_ignored(self):
        class C:
            x: int = 3
            y: Annotated[int, "not a marker"] = 3
        assert collect_param_specs(C) == ()

    def test_odd_and_range(self):
        class C:
            kernel_size: Annotated[int, Range(min=1, max=101), Odd(),
                                   Desc('side')] = 3

        (spec,) = collect_param_specs(C)
        assert spec.odd is True
        assert spec.nullable is False
        assert (spec.min_value, spec.max_value) == (1, 101)
        assert spec.description == 'side'

    def test_optional_is_nullable(self):
        class C:
            size: Annotated[Optional[int], Odd()] = None

        (spec,) = collect_param_specs(C)
        assert spec.param_type is int
        assert spec.nullable is True
        assert spec.default is None
        assert spec.required is False

        with pytest.raises(TypeError, match="mutually exclusive"):
            collect_param_specs(C)

    def test_inheritance_order_and_override(self):
        class Parent:
            kernel_size: Annotated[int, Range(max=101)] = 3
            workers: Annotated[int, Range(min=1)] = 1

        class Child(Parent):
            kernel_size: Annotated[int, Range(max=9)] = 5
            q: Annotated[float, Desc('order')] = 1.0

        specs = collect_param_specs(Child)
        assert [s.name for s in specs] == ['kernel_size', 'workers', 'q']
        assert specs[0].max_value == 9
        assert specs[0].default == 5


# ---------------------------------------------------------------------------
# Generated __init__ and _resolve_params
# ---------------------------------------------------------------------------

def _make_processor():
    @processor_version('1.0.0')
    class Box(ImageTransform):
        kernel_size: Annotated[int, Range(min=1, max=9), Odd(),
                               Desc('side')] = 3
        sigma: Annotated[Optional[float], Desc('spread')] = None

        def apply(self, source, **kwargs):
            return source

    return Box


class TestGeneratedInit:
    """Test the auto-generated keyword-only constructor."""

    def test_defaults(self):
        p = _make_processor()()
        assert (p.kernel_size, p.sigma) == (3, None)

    def test_values(self):
        p = _make_processor()(kernel_size=7, sigma=1.5)
        assert (p.kernel_size, p.sigma) == (7, 1.5)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            _make_processor()(5)

    def test_validation(self):
        Box = _make_processor()
        with pytest.raises(ValidationError, match="must be odd"):
            Box(kernel_size=4)
        with pytest.raises(ValidationError, match="above maximum"):
            Box(kernel_size=11)

    def test_unexpected_kwargs(self):
        with pytest.raises(TypeError, match="unexpected"):
            _make_processor()(radius=1)

    def test_required_missing(self):
        @processor_version('1.0.0')
        class P(ImageTransform):
            q: Annotated[float, Desc('order')]

            def apply(self, source, **kwargs):
                return source

        with pytest.raises(TypeError, match="missing required"):
            P()

    def test_signature(self):
        sig = inspect.signature(_make_processor().__init__)
        assert list(sig.parameters) == ['self', 'kernel_size', 'sigma']
        assert sig.parameters['kernel_size'].kind is \
            inspect.Parameter.KEYWORD_ONLY

    def test_post_init_called(self):
        @processor_version('1.0.0')
        class P(ImageTransform):
            kernel_size: Annotated[int, Odd()] = 3

            def __post_init__(self):
                self.radius = self.kernel_size // 2

            def apply(self, source, **kwargs):
                return source

        assert P(kernel_size=7).radius == 3

    def test_custom_init_kept(self):
        @processor_version('1.0.0')
        class P(ImageTransform):
            sigma: Annotated[float, Desc('spread')] = 1.0

            def __init__(self, sigma=1.0, label='custom'):
                self.sigma = sigma
                self.label = label

            def apply(self, source, **kwargs):
                return source

        p = P(2.0, label='x')
        assert (p.sigma, p.label) == (2.0, 'x')
        assert P.__param_specs__[0].name == 'sigma'

    def test_base_has_no_specs(self):
        assert ImageProcessor.__param_specs__ == ()


class TestResolveParams:
    """Test runtime merging of instance values and overrides."""

    def test_defaults(self):
        p = _make_processor()(kernel_size=5)
        assert p._resolve_params({}) == {'kernel_size': 5, 'sigma': None}

    def test_override(self):
        p = _make_processor()(kernel_size=5)
        resolved = p._resolve_params({'kernel_size': 9, 'progress_callback': print})
        assert resolved == {'kernel_size': 9, 'sigma': None}
        assert p.kernel_size == 5

    def test_override_validated(self):
        p = _make_processor()()
        with pytest.raises(ValidationError, match="odd"):
            p._resolve_params({'kernel_size': 2})
        with pytest.raises(TypeError, match="sigma"):
            p._resolve_params({'sigma': 'wide'})

    def test_report_progress(self):
        p = _make_processor()()
        seen = []
        p._report_progress({'progress_callback': seen.append}, 1)
        p._report_progress({}, 0.5)
        assert seen == [1.0]
        assert isinstance(seen[0], float)

    def test_repr(self):
        assert repr(_make_processor()(kernel_size=5)) == \
            "Box(kernel_size=5, sigma=None)"


# ---------------------------------------------------------------------------
# Alpha-preserving transform end-to-end
# ---------------------------------------------------------------------------

@processor_version('1.0.0')
class _Invert(AlphaPreservingMixin, ImageTransform):
    """Colour inversion with a tunable offset."""

    offset: Annotated[int, Range(min=0, max=255), Desc('Added after inversion')] = 0

    def _apply_rgb(self, rgb, **kwargs):
        params = self._resolve_params(kwargs)
        inverted = 255 - rgb.astype(np.int16) + params['offset']
        return np.clip(inverted, 0, 255).astype(np.uint8)


@processor_version('1.0.0')
class _Crop(AlphaPreservingMixin, ImageTransform):
    def _apply_rgb(self, rgb, **kwargs):
        return rgb[1:, 1:]


class TestAlphaPreservingIntegration:
    """End-to-end tests with a concrete alpha-preserving transform."""

    def test_colour_changed_alpha_kept(self, gradient_alpha_image):
        out = _Invert().apply(gradient_alpha_image)
        np.testing.assert_array_equal(
            out[..., :3], 255 - gradient_alpha_image[..., :3]
        )
        np.testing.assert_array_equal(out[..., 3], gradient_alpha_image[..., 3])

    def test_runtime_override(self, flat_image):
        out = _Invert().apply(flat_image, offset=10)
        assert np.all(out[..., :3] == 137)

    def test_override_out_of_range(self, flat_image):
        with pytest.raises(ValidationError, match="above maximum"):
            _Invert().apply(flat_image, offset=300)

    def test_shape_mismatch_raises(self, flat_image):
        from denoisekit.exceptions import ProcessorError
        with pytest.raises(ProcessorError, match="_Crop"):
            _Crop().apply(flat_image)

    def test_rejects_non_rgba(self):
        with pytest.raises(ValidationError, match="rows, cols, 4"):
            _Invert().apply(np.zeros((4, 4, 3), dtype=np.uint8))
