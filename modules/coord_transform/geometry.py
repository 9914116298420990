import logging
from typing import Any, Callable, Dict

from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape
from shapely.ops import transform

from core.exceptions import InvalidGeometryError

from .core import Coordinate, CoordType, InverseMode, converter_for

logger = logging.getLogger(__name__)


def _make_lnglat_func(converter: Callable[[float, float], Coordinate]):
    """
    Wrap a (lat, lon) converter as a shapely transform function over (x=lng, y=lat).
    """
    def _func(x, y, z=None):
        # shapely passes either scalars or coordinate sequences
        try:
            iter(x)
        except TypeError:
            lat, lon = converter(y, x)
            return (lon, lat) if z is None else (lon, lat, z)

        new_x = []
        new_y = []
        for i in range(len(x)):
            lat, lon = converter(y[i], x[i])
            new_x.append(lon)
            new_y.append(lat)
        if z is None:
            return tuple(new_x), tuple(new_y)
        return tuple(new_x), tuple(new_y), tuple(z)

    return _func


def transform_geometry(
    geometry: Dict[str, Any],
    from_type: CoordType,
    to_type: CoordType,
    inverse_mode: InverseMode = "approximate",
) -> Dict[str, Any]:
    """
    Convert every vertex of a GeoJSON geometry between coordinate systems.

    Args:
        geometry: GeoJSON geometry mapping, coordinates in [lng, lat(, z)] order.
        from_type: Input coordinate system, "wgs84" or "gcj02".
        to_type: Output coordinate system.
        inverse_mode: GCJ-02 -> WGS84 method, "approximate" or "iterative".

    Returns:
        GeoJSON geometry mapping in the target coordinate system.
    """
    geometry_type = geometry.get("type", "") if isinstance(geometry, dict) else ""
    try:
        geom = shape(geometry)
    except (ShapelyError, AttributeError, KeyError, TypeError, ValueError, IndexError) as exc:
        logger.warning("GeoJSON 解析失败 type=%s: %s", geometry_type, exc)
        raise InvalidGeometryError(f"无效的 GeoJSON 几何: {exc}", geometry_type=geometry_type) from exc

    converter = converter_for(from_type, to_type, inverse_mode)
    if from_type == to_type or geom.is_empty:
        return mapping(geom)

    converted = transform(_make_lnglat_func(converter), geom)
    logger.debug("Converted %s geometry %s -> %s", geom.geom_type, from_type, to_type)
    return mapping(converted)
