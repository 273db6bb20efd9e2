"""
Add-ons for adablob.

Provides helpers for display collaborators:
- binary raster → BGR image
- region box / caption overlays
"""

from .render import (
    render_binary,
    draw_regions,
    threshold_caption,
)


__all__ = [
    "render_binary", "draw_regions", "threshold_caption",
]
