from .core import convert_pois, fetch_core_pois, parse_poi_nodes, poi_display_name
from .schemas import PoiNode

__all__ = [
    "PoiNode",
    "convert_pois",
    "fetch_core_pois",
    "parse_poi_nodes",
    "poi_display_name",
]
