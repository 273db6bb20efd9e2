"""
Rendering helpers for display collaborators.

Turns binary rasters into OpenCV images and overlays region boxes and a
caption. Nothing in the core depends on this module.
"""

from __future__ import annotations
from typing import Iterable, Optional, Tuple
import cv2
import numpy as np

from ..core import Raster, Region

BOX_COLOR = (136, 136, 238)       # BGR of #EE8888
TRUE_BOX_COLOR = (0, 200, 0)


def render_binary(binary: Raster) -> np.ndarray:
    """Return a BGR uint8 image: ink white, background black."""
    gray = binary.as_2d().astype(np.uint8) * 255
    return cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)


def draw_regions(
    img: np.ndarray,
    regions: Iterable[Region],
    caption: Optional[str] = None,
    use_bounds: bool = False,
    color: Optional[Tuple[int, int, int]] = None,
    thickness: int = 1,
) -> np.ndarray:
    """
    Draw one rectangle per region on a copy of `img`.

    By default the rectangle joins the tracked top-left and bottom-right
    corners; `use_bounds=True` draws the true row/column extent instead.
    """
    out = img.copy()
    if out.ndim == 2:
        out = cv2.cvtColor(out, cv2.COLOR_GRAY2BGR)
    if color is None:
        color = TRUE_BOX_COLOR if use_bounds else BOX_COLOR

    for reg in regions:
        if use_bounds:
            r0, c0, r1, c1 = reg.bounds
        else:
            r0, c0 = reg.top_left
            r1, c1 = reg.bottom_right
        cv2.rectangle(out, (int(c0), int(r0)), (int(c1), int(r1)), color, thickness)

    if caption:
        cv2.putText(out, caption, (10, 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, BOX_COLOR, 1, cv2.LINE_AA)
    return out


def threshold_caption(ratio: float) -> str:
    return f"current threshold: {ratio:g}"
