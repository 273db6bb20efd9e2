"""
Connected-region labelling of background pixels in a binary raster.

Background pixels (False) are grouped into maximal 8-connected regions;
ink pixels (True) act as barriers and belong to no region. Traversal uses
an explicit LIFO work list over a flat visited buffer.

Each region carries four tracked corners. A corner is replaced whenever a
newly visited pixel satisfies both of its comparisons:

    top_left      row <= cur.row and col <= cur.col
    top_right     row >= cur.row and col <= cur.col
    bottom_left   row <= cur.row and col >= cur.col
    bottom_right  row >= cur.row and col >= cur.col

These coupled rules do not give the true bounding box in general; the
real extent is kept separately in `Region.bounds`.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Dict, List, NamedTuple, Tuple

from .raster import Raster

logger = logging.getLogger(__name__)


class Coord(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Region:
    """One connected background region."""

    top_left: Coord
    top_right: Coord
    bottom_left: Coord
    bottom_right: Coord
    size: int
    bounds: Tuple[int, int, int, int]  # (row_min, col_min, row_max, col_max)

    @property
    def box_area(self) -> int:
        """Area spanned by the tracked top-left and bottom-right corners."""
        return (self.bottom_right.row - self.top_left.row) * (self.bottom_right.col - self.top_left.col)

    def as_dict(self) -> Dict[str, object]:
        def pt(c: Coord) -> Dict[str, int]:
            return {"row": c.row, "col": c.col}

        return {
            "topLeft": pt(self.top_left),
            "topRight": pt(self.top_right),
            "bottomLeft": pt(self.bottom_left),
            "bottomRight": pt(self.bottom_right),
            "size": self.size,
        }


def label_regions(binary: Raster, *, seed_only_leading_edge: bool = False) -> List[Region]:
    """
    Partition the background of `binary` into 8-connected regions.

    Seeds are taken in row-major order. Neighbours are pushed in row-major
    order of the surrounding 3x3 block and popped last-in first-out.

    Args:
        binary: bool raster, True = ink.
        seed_only_leading_edge: when set, pixels in row 0 or column 0 are
            never reached through neighbour expansion, only as seeds.

    Returns:
        Regions in discovery order.
    """
    w, h = binary.width, binary.height
    if binary.empty:
        return []

    ink = binary.data.astype(bool).tolist()
    visited = bytearray(w * h)
    first = 1 if seed_only_leading_edge else 0
    regions: List[Region] = []

    for seed in range(w * h):
        if ink[seed] or visited[seed]:
            continue
        start = Coord(*divmod(seed, w))
        tl = tr = bl = br = start
        rmin = rmax = start.row
        cmin = cmax = start.col
        size = 0
        stack = [start]

        while stack:
            el = stack.pop()
            r, c = el
            i = binary.index(r, c)
            if visited[i]:
                continue
            visited[i] = 1
            size += 1

            if r <= tl.row and c <= tl.col:
                tl = el
            if r >= tr.row and c <= tr.col:
                tr = el
            if r <= bl.row and c >= bl.col:
                bl = el
            if r >= br.row and c >= br.col:
                br = el
            rmin, rmax = min(rmin, r), max(rmax, r)
            cmin, cmax = min(cmin, c), max(cmax, c)

            for k in range(max(r - 1, first), min(r + 2, h)):
                for l in range(max(c - 1, first), min(c + 2, w)):
                    j = binary.index(k, l)
                    if not ink[j] and not visited[j]:
                        stack.append(Coord(k, l))

        regions.append(Region(tl, tr, bl, br, size, (rmin, cmin, rmax, cmax)))

    logger.debug("labelled %d regions in %dx%d raster", len(regions), w, h)
    return regions
