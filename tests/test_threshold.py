from fractions import Fraction
import math
import numpy as np
import pytest

from adablob.core import (
    Raster, DimensionMismatch, InvalidRatio, adaptive_threshold, build_integral,
    window_half_extent, ratio_from_percent,
)

def reference_threshold(arr, ratio):
    # scalar loop over the same rule
    h, w = arr.shape
    t = build_integral(Raster.from_array(arr))
    s = w >> 4
    r = Fraction(str(ratio))
    out = np.zeros((h, w), bool)
    for y in range(h):
        for x in range(w):
            x1, y1 = max(x - s, 0), max(y - s, 0)
            x2, y2 = min(x + s, w - 1), min(y + s, h - 1)
            area = (x2 - x1 + 1) * (y2 - y1 + 1)
            out[y, x] = int(arr[y, x]) * area > t.local_sum(x1, y1, x2, y2) * r
    return out

@pytest.mark.parametrize("ratio, expected", [(0.5, True), (0.99, True), (1.0, False), (1.5, False)])
def test_uniform_raster_reduces_to_ratio_below_one(ratio, expected):
    r = Raster.from_array(np.full((20, 20), 7, np.uint8))
    bw = adaptive_threshold(r, ratio)
    assert bw.data.dtype == bool
    assert (bw.data == expected).all()

def test_zero_raster_is_all_background():
    r = Raster.from_array(np.zeros((8, 8), np.uint8))
    assert not adaptive_threshold(r, 1.0).data.any()
    assert not adaptive_threshold(r, 0.0).data.any()

def test_zero_ratio_marks_every_lit_pixel():
    arr = np.array([[0, 3], [9, 0]], np.uint8)
    bw = adaptive_threshold(Raster.from_array(arr), 0.0)
    assert bw.as_2d().tolist() == [[False, True], [True, False]]

@pytest.mark.parametrize("ratio", [0.0, 0.5, 0.9, 1.0, 1.13, 0.3333333333, 0.123456789012])
def test_matches_scalar_reference(rng, ratio):
    arr = rng.integers(0, 256, (9, 33), dtype=np.uint8)
    bw = adaptive_threshold(Raster.from_array(arr), ratio)
    assert np.array_equal(bw.as_2d(), reference_threshold(arr, ratio))

def test_comparison_is_exact_at_equality():
    # pixel 0: window [0, 1], 29 * 2 == (29 + 171) * 0.29 exactly;
    # in floating point 200 * 0.29 rounds below 58
    arr = np.zeros((1, 16), np.uint8)
    arr[0, 0], arr[0, 1] = 29, 171
    assert 58 > 200 * 0.29
    bw = adaptive_threshold(Raster.from_array(arr), 0.29)
    assert not bw.data[0]
    assert bw.data[1]

def test_long_decimal_ratio_is_not_rounded():
    # pixel 1: window [0, 2], 10 * 3 = 30 against 90 * 0.3333333333 < 30
    arr = np.zeros((1, 16), np.uint8)
    arr[0, :3] = [40, 10, 40]
    bw = adaptive_threshold(Raster.from_array(arr), 0.3333333333)
    assert bw.data[1]

def test_window_half_extent():
    assert window_half_extent(4) == 0
    assert window_half_extent(15) == 0
    assert window_half_extent(16) == 1
    assert window_half_extent(64) == 4
    assert ratio_from_percent(29) == pytest.approx(0.29)

def test_uneven_illumination(illuminated_page):
    raster, dark = illuminated_page
    bw = adaptive_threshold(raster, 0.8)
    assert np.array_equal(bw.as_2d(), ~dark)

def test_precomputed_integral_must_match():
    r = Raster.from_array(np.zeros((4, 5), np.uint8))
    other = build_integral(Raster.from_array(np.zeros((4, 4), np.uint8)))
    with pytest.raises(DimensionMismatch):
        adaptive_threshold(r, 1.0, other)

@pytest.mark.parametrize("ratio", [-0.1, math.nan, math.inf, "abc"])
def test_invalid_ratio_rejected(ratio):
    r = Raster.from_array(np.zeros((4, 4), np.uint8))
    with pytest.raises(InvalidRatio):
        adaptive_threshold(r, ratio)

def test_empty_raster():
    bw = adaptive_threshold(Raster(0, 0, np.zeros(0, np.uint8)), 1.0)
    assert bw.width == 0 and bw.data.size == 0
