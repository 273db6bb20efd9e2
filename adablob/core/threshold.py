"""
Adaptive (local-mean) thresholding driven by an integral image.

A pixel is ink when its intensity scaled by the window area exceeds the
window sum scaled by `ratio`:

    value * area > window_sum * ratio

The window is a square of half-extent `width >> 4` clamped to the raster,
so its area shrinks near the borders. The comparison is done in integers:
the ratio is turned into a fraction num/den first.
"""

from __future__ import annotations
from fractions import Fraction
import logging
import math
from typing import Optional, Tuple
import numpy as np

from .errors import DimensionMismatch, InvalidRatio
from .integral import IntegralTable, build_integral
from .raster import Raster

logger = logging.getLogger(__name__)

_INT64_SAFE = 2 ** 62


def window_half_extent(width: int) -> int:
    """Half-extent s of the square window; the window spans [x-s, x+s]."""
    return width >> 4


def ratio_from_percent(value: float) -> float:
    """Map a 0..200 slider position to a threshold ratio."""
    return float(value) / 100.0


def check_ratio(ratio: float) -> float:
    """Return `ratio` as float or raise InvalidRatio."""
    try:
        r = float(ratio)
    except (TypeError, ValueError) as e:
        raise InvalidRatio(f"ratio must be a number, got {ratio!r}") from e
    if not math.isfinite(r) or r < 0:
        raise InvalidRatio(f"ratio must be a finite non-negative number, got {ratio!r}")
    return r


def exact_ratio(ratio: float) -> Tuple[int, int]:
    """Return (numerator, denominator) of the shortest decimal form of the ratio (0.29 -> 29, 100)."""
    frac = Fraction(repr(check_ratio(ratio)))
    return frac.numerator, frac.denominator


def window_sums(integral: IntegralTable, s: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Per-pixel window sums and window areas, both (height, width) int64.

    The table is zero-padded by one row and column so that windows
    touching row/column 0 need no special casing.
    """
    w, h = integral.width, integral.height
    xs = np.arange(w)
    ys = np.arange(h)
    x1 = np.maximum(xs - s, 0)
    x2 = np.minimum(xs + s, w - 1)
    y1 = np.maximum(ys - s, 0)
    y2 = np.minimum(ys + s, h - 1)

    area = np.outer(y2 - y1 + 1, x2 - x1 + 1).astype(np.int64)

    padded = np.zeros((h + 1, w + 1), np.int64)
    padded[1:, 1:] = integral.as_2d()
    sums = (
        padded[np.ix_(y2 + 1, x2 + 1)]
        - padded[np.ix_(y1, x2 + 1)]
        - padded[np.ix_(y2 + 1, x1)]
        + padded[np.ix_(y1, x1)]
    )
    return sums, area


def adaptive_threshold(
    raster: Raster,
    ratio: float = 1.0,
    integral: Optional[IntegralTable] = None,
) -> Raster:
    """
    Binarize an intensity raster against its local window mean.

    Args:
        raster: uint8 intensity raster.
        ratio: sensitivity; 1.0 compares against the plain local mean.
        integral: precomputed table for `raster`; built when omitted.

    Returns:
        Binary raster of the same size, True where the pixel is ink.
    """
    num, den = exact_ratio(ratio)
    w, h = raster.width, raster.height
    if integral is None:
        integral = build_integral(raster)
    elif not integral.matches(raster):
        raise DimensionMismatch(
            f"integral table {integral.width}x{integral.height} does not match raster {w}x{h}"
        )
    if raster.empty:
        return Raster(w, h, np.zeros(w * h, bool))

    s = window_half_extent(w)
    sums, area = window_sums(integral, s)
    lhs = raster.as_2d().astype(np.int64) * area
    rhs = sums

    if 255 * int(area.max()) * max(num, den) >= _INT64_SAFE:
        lhs = lhs.astype(object)
        rhs = rhs.astype(object)
    ink = np.asarray(lhs * den > rhs * num, dtype=bool)

    logger.debug("threshold %dx%d s=%d ratio=%d/%d ink=%d", w, h, s, num, den, int(ink.sum()))
    return Raster(w, h, ink.reshape(-1))
