"""
Analysis parameter data structure.

Holds the knobs of one thresholding + labelling run.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .threshold import check_ratio, ratio_from_percent


@dataclass
class Params:
    """Configuration parameters for a single analysis run."""

    # Thresholding
    ratio: float = 1.0

    # Labelling
    seed_only_leading_edge: bool = False

    # Ranking (None keeps every region)
    top_k: Optional[int] = None

    @classmethod
    def from_percent(cls, percent: float, **kwargs) -> "Params":
        """Build params from a 0..200 slider position."""
        return cls(ratio=ratio_from_percent(percent), **kwargs)

    def validate(self) -> "Params":
        self.ratio = check_ratio(self.ratio)
        if self.top_k is not None and self.top_k < 0:
            raise ValueError(f"top_k must be >= 0, got {self.top_k}")
        return self
