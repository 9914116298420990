"""Convenience exports for service helpers."""

from .coord_transform import (
    convert_coordinate,
    gcj02_to_wgs84,
    gcj02_to_wgs84_iterative,
    transform_geometry,
    wgs84_to_gcj02,
)
from .poi import convert_pois, fetch_core_pois

__all__ = [
    "convert_coordinate",
    "convert_pois",
    "fetch_core_pois",
    "gcj02_to_wgs84",
    "gcj02_to_wgs84_iterative",
    "transform_geometry",
    "wgs84_to_gcj02",
]
