# Public API of the core package (re-export)
from .errors import (
    AdablobError,
    DimensionMismatch,
    InvalidRatio,
)
from .raster import (
    Raster,
    intensity_raster,
    binary_raster,
    intensities_from_rgba,
    binary_to_rgba,
)
from .integral import (
    IntegralTable,
    build_integral,
)
from .threshold import (
    window_half_extent,
    ratio_from_percent,
    check_ratio,
    adaptive_threshold,
)
from .labeling import (
    Coord,
    Region,
    label_regions,
)
from .ranking import (
    box_area,
    rank_regions,
)
from .params import Params
from .pipeline import (
    Analysis,
    analyse,
    Analyzer,
)
from .io_utils import (
    imread_gray,
    imread_rgba_channel,
)

__all__ = [
    # errors
    "AdablobError", "DimensionMismatch", "InvalidRatio",
    # rasters / pixel buffers
    "Raster", "intensity_raster", "binary_raster", "intensities_from_rgba", "binary_to_rgba",
    # integral image
    "IntegralTable", "build_integral",
    # adaptive threshold
    "window_half_extent", "ratio_from_percent", "check_ratio", "adaptive_threshold",
    # labelling & ranking
    "Coord", "Region", "label_regions", "box_area", "rank_regions",
    # params & pipeline
    "Params", "Analysis", "analyse", "Analyzer",
    # io
    "imread_gray", "imread_rgba_channel",
]
