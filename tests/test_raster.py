# -*- coding: utf-8 -*-
"""
Raster Model Tests - ImageBuffer invariants and pixel-source acquisition.

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

import logging

import numpy as np
import pytest

from denoisekit.exceptions import DenoiseError, PixelAccessError, ValidationError
from denoisekit.image_processing.raster import (
    ImageBuffer,
    PixelSource,
    as_rgba_pixels,
    read_source,
)


class _ArraySource:
    def __init__(self, pixels):
        self.pixels = pixels

    def read_pixels(self):
        return self.pixels


class _CrossOriginSource:
    def read_pixels(self):
        raise PixelAccessError("tainted by cross-origin data")


class _BrokenFileSource:
    def read_pixels(self):
        raise FileNotFoundError("missing.png")


class TestImageBuffer:
    """Test ImageBuffer construction and views."""

    def test_from_array(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        assert (buf.width, buf.height) == (32, 24)
        assert buf.data.shape == (32 * 24 * 4,)
        np.testing.assert_array_equal(buf.pixels, random_image)

    def test_from_array_copies(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        random_image[0, 0, 0] ^= 0xFF
        assert buf.pixels[0, 0, 0] != random_image[0, 0, 0]

    def test_row_major_layout(self):
        pixels = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
        buf = ImageBuffer.from_array(pixels)
        # pixel (x=1, y=1) starts at offset (1 * 3 + 1) * 4
        np.testing.assert_array_equal(buf.data[16:20], pixels[1, 1])

    def test_views(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        assert buf.shape == (24, 32, 4)
        np.testing.assert_array_equal(buf.rgb, random_image[..., :3])
        np.testing.assert_array_equal(buf.alpha, random_image[..., 3])

    def test_bytes_round_trip(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        again = ImageBuffer.from_bytes(buf.width, buf.height, buf.to_bytes())
        assert again == buf

    def test_length_mismatch_raises(self):
        with pytest.raises(ValidationError, match="width\\*height\\*4"):
            ImageBuffer(width=2, height=2, data=np.zeros(15, dtype=np.uint8))

    def test_wrong_dtype_raises(self):
        with pytest.raises(ValidationError, match="uint8"):
            ImageBuffer(width=1, height=1, data=np.zeros(4, dtype=np.int16))

    @pytest.mark.parametrize('width', [0, -1, 2.0, True])
    def test_bad_dimensions_raise(self, width):
        with pytest.raises(ValidationError):
            ImageBuffer(width=width, height=1, data=np.zeros(4, dtype=np.uint8))

    def test_empty_like_and_copy(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        empty = ImageBuffer.empty_like(buf)
        assert empty.shape == buf.shape
        assert not empty.data.any()
        dup = buf.copy()
        assert dup == buf
        dup.data[0] ^= 1
        assert dup != buf

    def test_errors_share_base(self):
        assert issubclass(ValidationError, DenoiseError)
        assert issubclass(ValidationError, ValueError)
        assert issubclass(PixelAccessError, DenoiseError)
        assert issubclass(PixelAccessError, PermissionError)


class TestAsRgbaPixels:
    """Test raster shape and dtype checks."""

    def test_accepts_buffer(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        assert as_rgba_pixels(buf).shape == (24, 32, 4)

    @pytest.mark.parametrize('shape', [(4, 4), (4, 4, 3), (0, 4, 4), (4, 4, 4, 1)])
    def test_rejects_bad_shape(self, shape):
        with pytest.raises(ValidationError):
            as_rgba_pixels(np.zeros(shape, dtype=np.uint8))

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="uint8"):
            as_rgba_pixels(np.zeros((2, 2, 4), dtype=np.float64))

    def test_rejects_list(self):
        with pytest.raises(ValidationError):
            as_rgba_pixels([[[0, 0, 0, 0]]])


class TestReadSource:
    """Test acquisition from buffers, arrays, and pixel sources."""

    def test_buffer_passthrough(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        assert read_source(buf) is buf

    def test_array_wrapped(self, random_image):
        buf = read_source(random_image)
        assert isinstance(buf, ImageBuffer)
        np.testing.assert_array_equal(buf.pixels, random_image)

    def test_pixel_source(self, random_image):
        source = _ArraySource(random_image)
        assert isinstance(source, PixelSource)
        np.testing.assert_array_equal(read_source(source).pixels, random_image)

    def test_pixel_source_returning_buffer(self, random_image):
        buf = ImageBuffer.from_array(random_image)
        assert read_source(_ArraySource(buf)) is buf

    def test_access_error_propagates(self, caplog):
        with caplog.at_level(logging.WARNING):
            with pytest.raises(PixelAccessError, match="cross-origin"):
                read_source(_CrossOriginSource())
        assert "not readable" in caplog.text

    def test_os_error_wrapped(self):
        with pytest.raises(PixelAccessError, match="missing.png") as info:
            read_source(_BrokenFileSource())
        assert isinstance(info.value.__cause__, FileNotFoundError)

    def test_bad_pixels_from_source(self):
        with pytest.raises(ValidationError):
            read_source(_ArraySource(np.zeros((2, 2), dtype=np.uint8)))
        with pytest.raises(ValidationError, match="read_pixels"):
            read_source(_ArraySource("not pixels"))

    def test_unsupported_type(self):
        with pytest.raises(ValidationError):
            read_source(42)
