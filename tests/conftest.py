import numpy as np
import cv2
import pytest

from adablob.core import Raster

# dark squares on the page: (row0, col0, rows, cols)
SQUARES = [(20, 20, 10, 10), (60, 40, 6, 14), (100, 100, 4, 4)]


@pytest.fixture
def rng():
    return np.random.default_rng(0)

@pytest.fixture
def small_gray(rng):
    # 64x64 synthetic image with light noise
    img = np.zeros((64, 64), np.uint8)
    cv2.circle(img, (16, 16), 6, 180, -1)
    cv2.circle(img, (40, 40), 9, 210, -1)
    noise = (rng.normal(0, 5, img.shape)).astype(np.int16)
    img = np.clip(img.astype(np.int16) + noise, 0, 255).astype(np.uint8)
    return img

@pytest.fixture
def illuminated_page():
    # horizontal light gradient 100..220 with three dark (30) squares
    img = np.zeros((128, 128), np.uint8)
    img[:] = (100 + np.arange(128) * 120 // 127).astype(np.uint8)
    dark = np.zeros_like(img, dtype=bool)
    for r, c, h, w in SQUARES:
        cv2.rectangle(img, (c, r), (c + w - 1, r + h - 1), 30, -1)
        dark[r:r + h, c:c + w] = True
    return Raster.from_array(img), dark
