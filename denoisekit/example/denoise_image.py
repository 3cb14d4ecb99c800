# -*- coding: utf-8 -*-
"""
Denoise Image Example - Run one denoising filter over an image file.

Decodes an image with Pillow into an RGBA8 raster, applies the selected
filter through ``FilterPipeline``, and encodes the result as PNG. When no
input file is given, a synthetic noisy scene from ``denoisekit.data_prep``
is filtered instead and both the noisy and the filtered rasters are written.

Demonstrates denoisekit integration:
  - a ``PixelSource`` backed by Pillow for decoding (outside the engine)
  - ``FilterParams.from_name`` for filter selection by name
  - ``FilterPipeline.submit`` with a progress callback
  - ``denoisekit.data_prep`` for synthetic noisy scenes
  - optional before/after display with matplotlib

Usage:
  python denoise_image.py --filter median --kernel-size 5 -o out.png in.png
  python denoise_image.py --filter gaussian --sigma 1.5 -o out.png in.png
  python denoise_image.py --filter contraharmonic --q 1.5 -o out.png
  python denoise_image.py --filter midpoint --scene checkerboard --show
  python denoise_image.py --help

Dependencies
------------
Pillow
matplotlib

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
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Third-party
import matplotlib
for _backend in ("QtAgg", "TkAgg", "MacOSX", "Agg"):
    try:
        matplotlib.use(_backend)
        break
    except ImportError:
        continue

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np
from PIL import Image

# denoisekit
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from denoisekit.data_prep import noisy_checkerboard, noisy_gradient, salt_and_pepper
from denoisekit.image_processing import FilterParams, FilterPipeline, ImageBuffer
from denoisekit.vocabulary import FilterKind


class PillowImageSource:
    """``PixelSource`` that decodes an image file with Pillow."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read_pixels(self) -> np.ndarray:
        with Image.open(self.path) as img:
            return np.asarray(img.convert('RGBA'), dtype=np.uint8).copy()


def save_png(image: ImageBuffer, path: Path) -> None:
    """Encode an RGBA8 buffer as PNG."""
    Image.fromarray(image.pixels).save(path)


def show_comparison(
    before: np.ndarray, after: ImageBuffer, title: str
) -> None:
    """Display the input and filtered rasters side by side."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    fig.suptitle(title, fontsize=12)
    for ax, pixels, label in (
        (axes[0], before, "Input"),
        (axes[1], after.pixels, "Filtered"),
    ):
        ax.imshow(pixels, interpolation="nearest")
        ax.set_title(label)
        ax.set_axis_off()
    plt.tight_layout()
    plt.show()


# ── CLI ──────────────────────────────────────────────────────────────


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Denoise an RGBA image with a spatial filter.",
    )
    parser.add_argument(
        "filepath",
        type=Path,
        nargs="?",
        default=None,
        help="Input image. Omit to filter a synthetic noisy scene.",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("denoised.png"),
        help="Output PNG path (default: denoised.png).",
    )
    parser.add_argument(
        "--filter",
        choices=[k.value for k in FilterKind],
        default=FilterKind.MEAN.value,
        help="Filter kind (default: mean).",
    )
    parser.add_argument(
        "--kernel-size",
        type=int,
        default=None,
        help="Odd kernel side length (default: 3; Gaussian: ceil(6*sigma)|1).",
    )
    parser.add_argument(
        "--sigma",
        type=float,
        default=1.0,
        help="Gaussian standard deviation (default: 1.0).",
    )
    parser.add_argument(
        "--q",
        type=float,
        default=1.5,
        help="Contraharmonic order Q (default: 1.5).",
    )
    parser.add_argument(
        "--scene",
        choices=("gradient", "checkerboard", "impulse"),
        default="gradient",
        help="Synthetic scene when no input is given (default: gradient).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Row-sweep worker threads for neighbourhood filters.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display input and result side by side with matplotlib.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args()


def build_params(
    name: str,
    kernel_size: Optional[int],
    sigma: float,
    q: float,
) -> FilterParams:
    """Map CLI options onto ``FilterParams`` for filter *name*."""
    kwargs = {}
    if kernel_size is not None:
        kwargs['kernel_size'] = kernel_size
    if name == FilterKind.GAUSSIAN.value:
        kwargs['sigma'] = sigma
    elif name == FilterKind.CONTRAHARMONIC_MEAN.value:
        kwargs['q'] = q
    return FilterParams.from_name(name, **kwargs)


# ── Main ─────────────────────────────────────────────────────────────


def denoise_image_example(
    filepath: Optional[Path],
    output: Path,
    params: FilterParams,
    scene: str = "gradient",
    workers: int = 1,
    show: bool = False,
) -> ImageBuffer:
    """Filter an image file or a synthetic scene and write the result.

    Parameters
    ----------
    filepath : Path, optional
        Input image. ``None`` selects a synthetic scene.
    output : Path
        Output PNG path.
    params : FilterParams
        Filter to run.
    scene : str
        Synthetic scene name, used only when *filepath* is ``None``.
    workers : int
        Row-sweep worker threads for neighbourhood filters.
    show : bool
        Display input and result with matplotlib when True.

    Returns
    -------
    ImageBuffer
        The filtered raster.
    """
    if filepath is None:
        if scene == "checkerboard":
            source = noisy_checkerboard(seed=0)
        elif scene == "impulse":
            source = salt_and_pepper(noisy_gradient(amplitude=0.0, seed=0),
                                     fraction=0.1, seed=1)
        else:
            source = noisy_gradient(seed=0)
        noisy_path = output.with_name(f"{output.stem}_noisy{output.suffix}")
        save_png(source, noisy_path)
        print(f"Wrote noisy {scene} scene to {noisy_path}")
    else:
        source = PillowImageSource(filepath)

    run_kwargs = {
        'progress_callback': lambda f: print(f"\r{params.kind.value}: {f:.0%}",
                                             end="", flush=True),
    }
    if params.kind is not FilterKind.GAUSSIAN:
        run_kwargs['workers'] = workers

    with FilterPipeline() as pipeline:
        result = pipeline.submit(source, params, **run_kwargs).result()
    print()

    save_png(result, output)
    print(f"Wrote {result.width} x {result.height} {params.kind.value} "
          f"result to {output}")
    if show:
        before = source.pixels if isinstance(source, ImageBuffer) \
            else source.read_pixels()
        show_comparison(before, result, f"{params.kind.value} filter")
    return result


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    denoise_image_example(
        args.filepath,
        args.output,
        build_params(args.filter, args.kernel_size, args.sigma, args.q),
        scene=args.scene,
        workers=args.workers,
        show=args.show,
    )
