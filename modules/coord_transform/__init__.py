from .core import (
    Coordinate,
    convert_coordinate,
    converter_for,
    gcj02_to_wgs84,
    gcj02_to_wgs84_iterative,
    out_of_china,
    wgs84_to_gcj02,
)
from .geometry import transform_geometry

__all__ = [
    "Coordinate",
    "convert_coordinate",
    "converter_for",
    "gcj02_to_wgs84",
    "gcj02_to_wgs84_iterative",
    "out_of_china",
    "transform_geometry",
    "wgs84_to_gcj02",
]
