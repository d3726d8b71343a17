"""Pixel inspection helpers for rendered canvases."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .models import Color


def _rgba_array(image: Image.Image) -> np.ndarray:
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.uint8)


def ink_mask(image: Image.Image, background: Color) -> np.ndarray:
    """Boolean mask of pixels that differ from the background color."""
    arr = _rgba_array(image)
    bg = np.array(background.as_tuple(), dtype=np.uint8)
    return np.any(arr != bg, axis=2)


def ink_bbox(image: Image.Image, background: Color) -> tuple[int, int, int, int] | None:
    """Return ``(left, top, right, bottom)`` of non-background pixels, or None."""
    mask = ink_mask(image, background)
    rows = np.flatnonzero(mask.any(axis=1))
    cols = np.flatnonzero(mask.any(axis=0))
    if rows.size == 0 or cols.size == 0:
        return None
    return (int(cols[0]), int(rows[0]), int(cols[-1]) + 1, int(rows[-1]) + 1)


def ink_coverage(image: Image.Image, background: Color) -> float:
    mask = ink_mask(image, background)
    if mask.size == 0:
        return 0.0
    return float(mask.mean())
