"""
Image loading into intensity rasters.

OpenCV is tried first; Pillow is the fallback for formats it cannot read.
"""

from __future__ import annotations
import cv2
import numpy as np
from PIL import Image

from .raster import Raster, intensities_from_rgba


def imread_gray(path: str) -> Raster:
    """Read an image and return it as an 8-bit intensity raster."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        # Fallback: use Pillow if OpenCV fails
        try:
            pil = Image.open(path)
        except OSError as e:
            raise OSError(f"cannot read image: {path}") from e
        if pil.mode not in ("L", "I;16", "I;16B", "I;16L"):
            pil = pil.convert("L")
        img = np.array(pil)

    # Normalize 16-bit and convert colour → gray if needed
    if img.ndim == 3:
        code = cv2.COLOR_BGRA2GRAY if img.shape[2] == 4 else cv2.COLOR_BGR2GRAY
        img = cv2.cvtColor(img, code)
    if img.dtype != np.uint8:
        img = cv2.normalize(img, None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)
    return Raster.from_array(img)


def imread_rgba_channel(path: str) -> Raster:
    """
    Read an image as RGBA and keep only its first channel.

    This is the canvas-style pixel source: every 4th byte of the
    interleaved buffer becomes the intensity.
    """
    with Image.open(path) as pil:
        rgba = pil.convert("RGBA")
        w, h = rgba.size
        return intensities_from_rgba(rgba.tobytes(), w, h)
