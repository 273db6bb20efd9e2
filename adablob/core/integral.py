"""
Integral image (summed-area table) construction and rectangle queries.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np

from .errors import DimensionMismatch
from .raster import Raster

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class IntegralTable:
    """table[y][x] = sum of intensities over (0, 0)..(x, y) inclusive, stored flat."""

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.data.size != self.width * self.height:
            raise DimensionMismatch(
                f"table of {self.data.size} entries does not fit {self.width}x{self.height}"
            )

    def as_2d(self) -> np.ndarray:
        return self.data.reshape(self.height, self.width)

    def at(self, x: int, y: int) -> int:
        return int(self.data[y * self.width + x])

    def local_sum(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """
        Sum of intensities over the inclusive rectangle [x1, x2] × [y1, y2].

        Uses inclusion–exclusion; rows/columns before index 0 contribute nothing.
        """
        total = self.at(x2, y2)
        if y1 > 0:
            total -= self.at(x2, y1 - 1)
        if x1 > 0:
            total -= self.at(x1 - 1, y2)
        if x1 > 0 and y1 > 0:
            total += self.at(x1 - 1, y1 - 1)
        return total

    def matches(self, raster: Raster) -> bool:
        return self.width == raster.width and self.height == raster.height


def build_integral(raster: Raster) -> IntegralTable:
    """
    Build the integral table of an intensity raster in one forward pass.

    Each row is the running row sum added to the row above it. Range
    checking of the samples is left to the caller.
    """
    w, h = raster.width, raster.height
    if raster.empty:
        return IntegralTable(w, h, np.zeros(w * h, np.int64))

    row_sums = np.cumsum(raster.as_2d(), axis=1, dtype=np.int64)
    table = np.cumsum(row_sums, axis=0, dtype=np.int64)
    logger.debug("integral table %dx%d, total=%d", w, h, int(table[-1, -1]))
    return IntegralTable(w, h, table.reshape(-1))
