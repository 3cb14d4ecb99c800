# -*- coding: utf-8 -*-
"""
Raster Model - RGBA8 image buffer and pixel-source access.

Defines ``ImageBuffer``, the row-major RGBA8 raster the filter engine reads
and writes, the ``PixelSource`` protocol implemented by external image
loaders, and ``read_source`` which turns any accepted input into an
``ImageBuffer`` snapshot. Decoding and encoding of image files is left to
the collaborator behind ``PixelSource``.

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
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.exceptions import PixelAccessError, ValidationError

logger = logging.getLogger(__name__)

CHANNELS = 4
ALPHA = 3


@dataclass
class ImageBuffer:
    """Row-major RGBA8 raster.

    Parameters
    ----------
    width : int
        Raster width in pixels.
    height : int
        Raster height in pixels.
    data : np.ndarray
        Flat ``uint8`` array of length ``width * height * 4`` holding
        ``R, G, B, A`` for each pixel in row-major order.

    Raises
    ------
    ValidationError
        If the dimensions are not positive integers or ``data`` does not
        hold exactly ``width * height * 4`` uint8 values.

    Examples
    --------
    >>> buf = ImageBuffer.from_array(np.zeros((2, 3, 4), dtype=np.uint8))
    >>> buf.width, buf.height, buf.data.size
    (3, 2, 24)
    """

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self) -> None:
        for name in ('width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValidationError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if value < 1:
                raise ValidationError(f"{name} must be >= 1, got {value}")
        self.width = int(self.width)
        self.height = int(self.height)

        data = np.asarray(self.data)
        if data.dtype != np.uint8:
            raise ValidationError(
                f"data must be uint8, got {data.dtype}"
            )
        expected = self.width * self.height * CHANNELS
        if data.size != expected:
            raise ValidationError(
                f"data length must be width*height*4 = {expected}, "
                f"got {data.size}"
            )
        self.data = data.reshape(-1)

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def from_array(cls, pixels: np.ndarray) -> 'ImageBuffer':
        """Wrap a ``(rows, cols, 4)`` uint8 array (copied).

        Parameters
        ----------
        pixels : np.ndarray
            RGBA8 pixel array.

        Returns
        -------
        ImageBuffer
        """
        pixels = as_rgba_pixels(pixels)
        rows, cols = pixels.shape[:2]
        return cls(width=cols, height=rows,
                   data=np.ascontiguousarray(pixels).reshape(-1).copy())

    @classmethod
    def from_bytes(cls, width: int, height: int, raw: bytes) -> 'ImageBuffer':
        """Build a buffer from raw RGBA8 bytes in row-major order."""
        return cls(width=width, height=height,
                   data=np.frombuffer(raw, dtype=np.uint8).copy())

    @classmethod
    def empty_like(cls, other: 'ImageBuffer') -> 'ImageBuffer':
        """Allocate a zeroed buffer with the same shape as *other*."""
        return cls(width=other.width, height=other.height,
                   data=np.zeros_like(other.data))

    # -----------------------------------------------------------------
    # Views
    # -----------------------------------------------------------------
    @property
    def shape(self) -> tuple:
        """``(rows, cols, channels)`` shape of ``pixels``."""
        return (self.height, self.width, CHANNELS)

    @property
    def pixels(self) -> np.ndarray:
        """``(rows, cols, 4)`` view onto ``data``."""
        return self.data.reshape(self.shape)

    @property
    def rgb(self) -> np.ndarray:
        """``(rows, cols, 3)`` view of the colour channels."""
        return self.pixels[..., :ALPHA]

    @property
    def alpha(self) -> np.ndarray:
        """``(rows, cols)`` view of the alpha channel."""
        return self.pixels[..., ALPHA]

    def to_bytes(self) -> bytes:
        """Raw RGBA8 bytes in row-major order."""
        return self.data.tobytes()

    def copy(self) -> 'ImageBuffer':
        """Independent deep copy."""
        return ImageBuffer(width=self.width, height=self.height,
                           data=self.data.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )


@runtime_checkable
class PixelSource(Protocol):
    """External collaborator that hands out decoded RGBA8 pixels.

    Implementations raise ``PixelAccessError`` (or any ``OSError``) when
    the pixels exist but may not be read.
    """

    def read_pixels(self) -> Union[ImageBuffer, np.ndarray]:
        ...


def as_rgba_pixels(source: Union[ImageBuffer, np.ndarray]) -> np.ndarray:
    """Return the ``(rows, cols, 4)`` uint8 pixel array behind *source*.

    Parameters
    ----------
    source : ImageBuffer or np.ndarray
        Buffer or RGBA8 array.

    Returns
    -------
    np.ndarray
        Pixel array (a view, not a copy).

    Raises
    ------
    ValidationError
        If *source* is not a 3D ``(rows, cols, 4)`` uint8 array or an
        ``ImageBuffer``.
    """
    if isinstance(source, ImageBuffer):
        return source.pixels
    if not isinstance(source, np.ndarray):
        raise ValidationError(
            f"source must be an ImageBuffer or numpy array, "
            f"got {type(source).__name__}"
        )
    if source.ndim != 3 or source.shape[2] != CHANNELS:
        raise ValidationError(
            f"Expected RGBA raster of shape (rows, cols, 4), "
            f"got {source.shape}"
        )
    if source.shape[0] < 1 or source.shape[1] < 1:
        raise ValidationError(f"Raster must not be empty, got {source.shape}")
    if source.dtype != np.uint8:
        raise ValidationError(f"Expected uint8 raster, got {source.dtype}")
    return source


def read_source(
    source: Union[ImageBuffer, np.ndarray, PixelSource],
) -> ImageBuffer:
    """Acquire an ``ImageBuffer`` snapshot from any accepted input.

    Parameters
    ----------
    source : ImageBuffer, np.ndarray, or PixelSource
        The raster itself, or a collaborator that can produce it.

    Returns
    -------
    ImageBuffer

    Raises
    ------
    PixelAccessError
        If a ``PixelSource`` refuses to hand out its pixels.
    ValidationError
        If the pixels are not an RGBA8 raster.
    """
    if isinstance(source, ImageBuffer):
        return source
    if isinstance(source, np.ndarray):
        return ImageBuffer.from_array(source)
    if isinstance(source, PixelSource):
        try:
            pixels = source.read_pixels()
        except PixelAccessError:
            logger.warning("Pixel source %s is not readable",
                           type(source).__qualname__)
            raise
        except OSError as exc:
            logger.warning("Pixel source %s is not readable: %s",
                           type(source).__qualname__, exc)
            raise PixelAccessError(
                f"Cannot read pixels from {type(source).__qualname__}: {exc}"
            ) from exc
        if isinstance(pixels, (ImageBuffer, np.ndarray)):
            return read_source(pixels)
        raise ValidationError(
            f"{type(source).__qualname__}.read_pixels() must return an "
            f"ImageBuffer or numpy array, got {type(pixels).__name__}"
        )
    raise ValidationError(
        f"source must be an ImageBuffer, numpy array, or PixelSource, "
        f"got {type(source).__name__}"
    )

