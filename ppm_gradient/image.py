from concurrent.futures import ThreadPoolExecutor
from typing import Tuple

import numpy as np

# Image
IMAGE_WIDTH = 1280
IMAGE_HEIGHT = 720
MAX_VALUE = 255

# 255.999 keeps 1.0 at 255 after truncation
SCALE = 255.999
BLUE = 0.25


def _check_size(width: int, height: int) -> None:
    if width < 2 or height < 2:
        raise ValueError(f"Image must be at least 2x2, got {width}x{height}")


def _check_workers(workers: int) -> None:
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")


def color_at(i: int, j: int, width: int, height: int) -> Tuple[int, int, int]:
    _check_size(width, height)
    r = i / (width - 1)
    g = j / (height - 1)
    b = BLUE
    return int(SCALE * r), int(SCALE * g), int(SCALE * b)


def render_rows(width: int, height: int, rows=None) -> np.ndarray:
    """
    Compute the gradient for a set of rows.

    Args:
        width, height: Full image dimensions.
        rows: Iterable of row indices j. Defaults to every row from
              height-1 down to 0, which is the order rows appear in the file.
    Returns:
        np.ndarray: uint8 array of shape (len(rows), width, 3).
    """
    _check_size(width, height)
    if rows is None:
        rows = range(height - 1, -1, -1)
    j = np.asarray(list(rows), dtype=np.int64)
    i = np.arange(width, dtype=np.int64)

    r = i / (width - 1)
    g = j / (height - 1)

    pixels = np.empty((len(j), width, 3), dtype=np.uint8)
    # Values are non-negative so astype truncates the same way int() does
    pixels[:, :, 0] = (SCALE * r).astype(np.uint8)[np.newaxis, :]
    pixels[:, :, 1] = (SCALE * g).astype(np.uint8)[:, np.newaxis]
    pixels[:, :, 2] = int(SCALE * BLUE)
    return pixels


def _bands(height: int, count: int):
    # Contiguous runs of j, highest first, covering height-1 .. 0
    per_band = height // count + 1
    top = height - 1
    while top >= 0:
        bottom = max(top - per_band + 1, 0)
        yield range(top, bottom - 1, -1)
        top = bottom - 1


def _render_bands(width: int, height: int, workers: int):
    _check_workers(workers)
    _check_size(width, height)
    if workers == 1:
        yield render_rows(width, height)
        return
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # map() yields in submission order, so bands stay top to bottom
        yield from pool.map(lambda band: render_rows(width, height, band), _bands(height, workers))


def render(width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT, workers: int = 1) -> np.ndarray:
    return np.concatenate(list(_render_bands(width, height, workers)), axis=0)


def format_pixels(pixels: np.ndarray) -> str:
    flat = pixels.reshape(-1, 3)
    if len(flat) == 0:
        return ""
    return "\n".join(f"{r} {g} {b}" for r, g, b in flat.tolist()) + "\n"


def write_header(stream, width: int, height: int) -> None:
    stream.write("P3\n")
    stream.write(f"{width} {height}\n")
    stream.write(f"{MAX_VALUE}\n")


def write_ppm(stream, width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT, workers: int = 1, on_band=None) -> None:
    """
    Write the gradient image to a text stream in P3 format.

    Rows are written from j = height-1 down to 0, one pixel per line.
    on_band, if given, is called with the band index after each band is written.
    """
    _check_size(width, height)
    _check_workers(workers)
    write_header(stream, width, height)
    for index, band in enumerate(_render_bands(width, height, workers)):
        stream.write(format_pixels(band))
        if on_band is not None:
            on_band(index)
    stream.flush()
