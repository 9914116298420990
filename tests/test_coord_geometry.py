import sys
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest
from shapely.geometry import Polygon, shape

from core.exceptions import InvalidGeometryError
from modules.coord_transform import gcj02_to_wgs84, transform_geometry, wgs84_to_gcj02


def _sample_wgs84_ring():
    lat = 31.2304
    lon = 121.4737
    d = 0.01
    return [
        [lon - d, lat - d],
        [lon + d, lat - d],
        [lon + d, lat + d],
        [lon - d, lat + d],
        [lon - d, lat - d],
    ]


def _to_lists(coords):
    if isinstance(coords, (list, tuple)) and coords and isinstance(coords[0], (list, tuple)):
        return [_to_lists(c) for c in coords]
    return list(coords)


def test_point_uses_lnglat_order():
    geometry = {"type": "Point", "coordinates": [106.5860, 29.5690]}
    result = transform_geometry(geometry, "wgs84", "gcj02")
    lat, lon = wgs84_to_gcj02(29.5690, 106.5860)
    assert result["type"] == "Point"
    assert list(result["coordinates"]) == [lon, lat]


def test_polygon_vertices_match_point_conversion():
    ring = _sample_wgs84_ring()
    result = transform_geometry({"type": "Polygon", "coordinates": [ring]}, "wgs84", "gcj02")
    assert result["type"] == "Polygon"
    converted = _to_lists(result["coordinates"])[0]
    assert len(converted) == len(ring)
    for (lng, lat), (glng, glat) in zip(ring, converted):
        expected_lat, expected_lon = wgs84_to_gcj02(lat, lng)
        assert glng == expected_lon
        assert glat == expected_lat

    poly = shape(result)
    assert isinstance(poly, Polygon)
    assert poly.is_valid


def test_polygon_with_hole_keeps_interiors():
    outer = _sample_wgs84_ring()
    lat = 31.2304
    lon = 121.4737
    d = 0.002
    hole = [
        [lon - d, lat - d],
        [lon - d, lat + d],
        [lon + d, lat + d],
        [lon + d, lat - d],
        [lon - d, lat - d],
    ]
    result = transform_geometry({"type": "Polygon", "coordinates": [outer, hole]}, "wgs84", "gcj02")
    assert len(result["coordinates"]) == 2


def test_multilinestring_and_collection():
    line = [[116.39, 39.90], [116.40, 39.91]]
    mls = transform_geometry({"type": "MultiLineString", "coordinates": [line, line]}, "gcj02", "wgs84")
    assert mls["type"] == "MultiLineString"
    first = _to_lists(mls["coordinates"])[0][0]
    lat, lon = gcj02_to_wgs84(39.90, 116.39)
    assert first == [lon, lat]

    collection = {
        "type": "GeometryCollection",
        "geometries": [
            {"type": "Point", "coordinates": [116.39, 39.90]},
            {"type": "LineString", "coordinates": line},
        ],
    }
    result = transform_geometry(collection, "gcj02", "wgs84")
    assert result["type"] == "GeometryCollection"
    assert len(result["geometries"]) == 2


def test_z_coordinate_is_kept():
    result = transform_geometry({"type": "Point", "coordinates": [106.5860, 29.5690, 250.0]}, "wgs84", "gcj02")
    assert len(result["coordinates"]) == 3
    assert result["coordinates"][2] == 250.0


def test_identity_conversion_returns_same_coordinates():
    ring = _sample_wgs84_ring()
    result = transform_geometry({"type": "LineString", "coordinates": ring}, "wgs84", "wgs84")
    assert _to_lists(result["coordinates"]) == ring


def test_outside_china_geometry_unchanged():
    ring = [[-0.2, 51.4], [-0.1, 51.4], [-0.1, 51.5], [-0.2, 51.4]]
    result = transform_geometry({"type": "LineString", "coordinates": ring}, "wgs84", "gcj02")
    assert _to_lists(result["coordinates"]) == ring


@pytest.mark.parametrize(
    "geometry",
    [
        {"type": "Hexagon", "coordinates": [1, 2]},
        {"coordinates": [1, 2]},
        {"type": "Polygon", "coordinates": [[[121.47, 31.23], [121.48, 31.24]]]},
    ],
)
def test_invalid_geometry_raises_biz_error(geometry):
    with pytest.raises(InvalidGeometryError) as exc_info:
        transform_geometry(geometry, "wgs84", "gcj02")
    assert exc_info.value.code == 400


if __name__ == "__main__":
    test_point_uses_lnglat_order()
    test_polygon_vertices_match_point_conversion()
    test_multilinestring_and_collection()
    print("Geometry conversion tests passed.")
