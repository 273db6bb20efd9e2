"""
Exception types raised by the core.

Empty input is not an error: stages return empty outputs for it.
"""

from __future__ import annotations


class AdablobError(Exception):
    """Base class for all adablob errors."""


class DimensionMismatch(AdablobError, ValueError):
    """Raster, buffer or integral table sizes disagree."""


class InvalidRatio(AdablobError, ValueError):
    """Threshold ratio is negative or not a finite number."""
