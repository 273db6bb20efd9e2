"""
End-to-end analysis: integral image -> adaptive threshold -> labelling -> ranking.

Every call builds fresh buffers and keeps no state between calls.
`Analyzer` serializes calls for hosts that invoke it from several threads.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
import threading
from typing import Dict, List, Optional

from .integral import build_integral
from .labeling import Region, label_regions
from .params import Params
from .ranking import rank_regions
from .raster import Raster
from .threshold import adaptive_threshold

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Analysis:
    """Result of one run: the binary raster and the ranked regions."""

    binary: Raster
    regions: List[Region] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {
            "width": self.binary.width,
            "height": self.binary.height,
            "binary": self.binary.data.tolist(),
            "regions": [r.as_dict() for r in self.regions],
        }


def analyse(raster: Raster, params: Optional[Params] = None) -> Analysis:
    """Run the full pipeline on an intensity raster."""
    P = replace(params or Params()).validate()

    integral = build_integral(raster)
    binary = adaptive_threshold(raster, P.ratio, integral)
    regions = label_regions(binary, seed_only_leading_edge=P.seed_only_leading_edge)
    ranked = rank_regions(regions, P.top_k)

    logger.info(
        "analysed %dx%d at ratio %.3f: %d ink px, %d regions",
        raster.width, raster.height, P.ratio, int(binary.data.sum()), len(regions),
    )
    return Analysis(binary, ranked)


class Analyzer:
    """Runs `analyse` one call at a time behind a lock."""

    def __init__(self, params: Optional[Params] = None) -> None:
        self.params = params or Params()
        self._lock = threading.Lock()

    def run(self, raster: Raster, ratio: Optional[float] = None) -> Analysis:
        with self._lock:
            P = self.params if ratio is None else replace(self.params, ratio=ratio)
            return analyse(raster, P)
