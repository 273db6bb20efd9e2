"""Ordering of labelled regions by tracked box area."""

from __future__ import annotations
from typing import Iterable, List, Optional

from .labeling import Region


def box_area(region: Region) -> int:
    return region.box_area


def rank_regions(regions: Iterable[Region], top_k: Optional[int] = None) -> List[Region]:
    """
    Return regions sorted by box area, largest first.

    The sort is stable, so equal areas keep their input order. Regions
    themselves are not modified. `top_k` truncates the result.
    """
    ranked = sorted(regions, key=box_area, reverse=True)
    if top_k is not None:
        ranked = ranked[:max(0, int(top_k))]
    return ranked
