# -*- coding: utf-8 -*-
"""
Synthetic Noise - Noisy RGBA8 test rasters for exercising the filters.

Provides generators for the two reference test scenes (a noisy diagonal
colour gradient and a noisy hue-patch pattern on a transparent background)
plus the two corruptions most of the filters are designed against:
salt-and-pepper impulses and additive Gaussian noise. Uniform scene noise
is shared across R, G and B of a pixel; alpha is never altered. Every
generator takes a ``seed`` and draws from ``numpy.random.default_rng`` so
results are reproducible.

Dependencies
------------
numpy

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
import colorsys
from typing import Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# denoisekit internal
from denoisekit.exceptions import ValidationError
from denoisekit.image_processing.raster import ALPHA, ImageBuffer, as_rgba_pixels

_GRADIENT_STOPS: Sequence[Tuple[float, Tuple[int, int, int]]] = (
    (0.0, (0xff, 0x6b, 0x6b)),
    (0.5, (0x4e, 0xcd, 0xc4)),
    (1.0, (0x45, 0xb7, 0xd1)),
)


def _check_dims(width: int, height: int) -> None:
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(
                f"{name} must be a positive integer, got {value!r}"
            )


def _add_shared_noise(
    rgb: np.ndarray, amplitude: float, rng: np.random.Generator
) -> np.ndarray:
    """Add one uniform draw in ``[-amplitude/2, amplitude/2)`` per pixel."""
    noise = (rng.random(rgb.shape[:2]) - 0.5) * amplitude
    noisy = rgb.astype(np.float64) + noise[..., np.newaxis]
    return np.clip(np.rint(noisy), 0, 255).astype(np.uint8)


def noisy_gradient(
    width: int = 300,
    height: int = 300,
    amplitude: float = 100.0,
    seed: Optional[int] = None,
) -> ImageBuffer:
    """Opaque diagonal three-stop gradient with uniform noise.

    Parameters
    ----------
    width, height : int
        Raster dimensions in pixels. Default 300 x 300.
    amplitude : float
        Peak-to-peak noise amplitude. Default 100 (noise in +/-50).
    seed : int, optional
        Random seed.

    Returns
    -------
    ImageBuffer
    """
    _check_dims(width, height)
    rng = np.random.default_rng(seed)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    # Projection onto the (0, 0) -> (width, height) diagonal
    t = (xs * width + ys * height) / float(width * width + height * height)
    positions = [p for p, _ in _GRADIENT_STOPS]
    rgb = np.stack([
        np.interp(t, positions, [c[ch] for _, c in _GRADIENT_STOPS])
        for ch in range(3)
    ], axis=-1)

    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., :ALPHA] = _add_shared_noise(rgb, amplitude, rng)
    pixels[..., ALPHA] = 255
    return ImageBuffer.from_array(pixels)


def noisy_checkerboard(
    width: int = 300,
    height: int = 300,
    cell: int = 20,
    patch: int = 15,
    amplitude: float = 80.0,
    seed: Optional[int] = None,
) -> ImageBuffer:
    """Grid of opaque hue patches on a transparent background, with noise.

    Each ``cell x cell`` block holds a ``patch x patch`` square in its top
    left corner coloured ``hsl((x + y) % 360, 70%, 60%)``; the gaps stay
    transparent black before noise is added, so the result exercises
    alpha preservation.

    Parameters
    ----------
    width, height : int
        Raster dimensions in pixels. Default 300 x 300.
    cell : int
        Grid pitch in pixels. Default 20.
    patch : int
        Patch side length in pixels. Default 15.
    amplitude : float
        Peak-to-peak noise amplitude. Default 80 (noise in +/-40).
    seed : int, optional
        Random seed.

    Returns
    -------
    ImageBuffer
    """
    _check_dims(width, height)
    if not 0 < patch <= cell:
        raise ValidationError(
            f"patch must be in [1, cell={cell}], got {patch}"
        )
    rng = np.random.default_rng(seed)

    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(0, height, cell):
        for x in range(0, width, cell):
            hue = ((x + y) % 360) / 360.0
            # colorsys takes (h, l, s)
            r, g, b = colorsys.hls_to_rgb(hue, 0.6, 0.7)
            pixels[y:y + patch, x:x + patch, :ALPHA] = np.rint(
                np.array([r, g, b]) * 255
            ).astype(np.uint8)
            pixels[y:y + patch, x:x + patch, ALPHA] = 255

    pixels[..., :ALPHA] = _add_shared_noise(pixels[..., :ALPHA], amplitude, rng)
    return ImageBuffer.from_array(pixels)


def salt_and_pepper(
    image: Union[ImageBuffer, np.ndarray],
    fraction: float = 0.05,
    salt_ratio: float = 0.5,
    seed: Optional[int] = None,
) -> ImageBuffer:
    """Replace a fraction of pixels with black (pepper) or white (salt).

    Parameters
    ----------
    image : ImageBuffer or np.ndarray
        Source raster. Not modified.
    fraction : float
        Fraction of pixels to corrupt, in ``[0, 1]``. Default 0.05.
    salt_ratio : float
        Fraction of corrupted pixels set to 255 rather than 0, in
        ``[0, 1]``. Default 0.5.
    seed : int, optional
        Random seed.

    Returns
    -------
    ImageBuffer
    """
    for name, value in (('fraction', fraction), ('salt_ratio', salt_ratio)):
        if not 0.0 <= value <= 1.0:
            raise ValidationError(f"{name} must be in [0, 1], got {value}")
    rng = np.random.default_rng(seed)
    pixels = as_rgba_pixels(image).copy()

    draw = rng.random(pixels.shape[:2])
    corrupted = draw < fraction
    salt = corrupted & (rng.random(pixels.shape[:2]) < salt_ratio)
    pepper = corrupted & ~salt
    pixels[salt, :ALPHA] = 255
    pixels[pepper, :ALPHA] = 0
    return ImageBuffer.from_array(pixels)


def gaussian_noise(
    image: Union[ImageBuffer, np.ndarray],
    sigma: float = 10.0,
    seed: Optional[int] = None,
) -> ImageBuffer:
    """Add independent zero-mean Gaussian noise to every colour sample.

    Parameters
    ----------
    image : ImageBuffer or np.ndarray
        Source raster. Not modified.
    sigma : float
        Noise standard deviation in grey levels. Default 10.
    seed : int, optional
        Random seed.

    Returns
    -------
    ImageBuffer
    """
    if sigma < 0:
        raise ValidationError(f"sigma must be >= 0, got {sigma}")
    rng = np.random.default_rng(seed)
    pixels = as_rgba_pixels(image).copy()
    rgb = pixels[..., :ALPHA].astype(np.float64)
    rgb += rng.normal(0.0, sigma, size=rgb.shape)
    pixels[..., :ALPHA] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    return ImageBuffer.from_array(pixels)
