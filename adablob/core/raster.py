"""
Flat raster container and pixel-buffer conversions.

A raster is a width × height grid stored as a flat numpy buffer in
row-major order. Two kinds are used:
- intensity rasters (uint8, 0..255)
- binary rasters (bool, True = foreground / ink)
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from .errors import DimensionMismatch


@dataclass(frozen=True, eq=False)
class Raster:
    """Single-channel raster backed by a flat buffer of width*height samples."""

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise DimensionMismatch(f"negative raster size {self.width}x{self.height}")
        if self.data.ndim != 1 or self.data.size != self.width * self.height:
            raise DimensionMismatch(
                f"buffer of {self.data.size} samples does not fit {self.width}x{self.height}"
            )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Raster":
        """Wrap a (height, width) array."""
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise DimensionMismatch(f"expected a 2-D array, got shape {arr.shape}")
        h, w = arr.shape
        return cls(w, h, np.ascontiguousarray(arr).reshape(-1))

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def index(self, row: int, col: int) -> int:
        return row * self.width + col

    def as_2d(self) -> np.ndarray:
        """Return a (height, width) view of the buffer."""
        return self.data.reshape(self.height, self.width)


def intensity_raster(width: int, height: int, values) -> Raster:
    """Build a uint8 intensity raster from any flat sequence of samples."""
    return Raster(width, height, np.asarray(values, dtype=np.uint8).reshape(-1))


def binary_raster(width: int, height: int, values) -> Raster:
    """Build a bool raster (True = ink) from any flat sequence."""
    return Raster(width, height, np.asarray(values, dtype=bool).reshape(-1))


def intensities_from_rgba(buffer, width: int, height: int) -> Raster:
    """
    Extract an intensity raster from a 4-channel interleaved buffer.

    Reads every 4th byte (the first channel of each pixel); no colour
    conversion is applied.
    """
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        buf = np.frombuffer(buffer, dtype=np.uint8)
    else:
        buf = np.asarray(buffer, dtype=np.uint8).reshape(-1)
    if buf.size != 4 * width * height:
        raise DimensionMismatch(
            f"RGBA buffer of {buf.size} bytes does not fit {width}x{height}"
        )
    return Raster(width, height, buf[0::4].copy())


def binary_to_rgba(binary: Raster) -> np.ndarray:
    """
    Convert a binary raster to an opaque RGBA byte buffer.

    Ink pixels become white (255, 255, 255, 255), background pixels
    black (0, 0, 0, 255).
    """
    out = np.zeros((binary.data.size, 4), np.uint8)
    out[binary.data.astype(bool), :3] = 255
    out[:, 3] = 255
    return out.reshape(-1)
