"""
POI ingestion: pull POI nodes from the POI source and move them between coordinate systems.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

import requests

from config import settings
from core.exceptions import ExternalApiError
from modules.coord_transform import converter_for

from .schemas import PoiNode

logger = logging.getLogger(__name__)

DEFAULT_POI_LABEL = "Destination"


def poi_display_name(tags: Optional[Dict[str, str]]) -> str:
    """
    Label shown for a POI: English name first, then local name.
    """
    tags = tags or {}
    return tags.get("name:en") or tags.get("name") or DEFAULT_POI_LABEL


def parse_poi_nodes(payload: Any) -> List[PoiNode]:
    """
    Build PoiNode objects from a raw list (or {"pois": [...]}) payload.
    Records without an id or with unusable coordinates are skipped.
    """
    if isinstance(payload, dict):
        payload = payload.get("pois") or []
    if not isinstance(payload, list):
        return []

    nodes: List[PoiNode] = []
    for item in payload:
        if not isinstance(item, dict) or item.get("id") is None:
            logger.debug("Skipping POI without id: %s", item)
            continue
        try:
            lat = float(item["lat"])
            lon = float(item["lon"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Skipping POI with invalid coordinates: %s", item)
            continue
        tags = item.get("tags") or {}
        if not isinstance(tags, dict):
            tags = {}
        try:
            nodes.append(
                PoiNode(
                    id=item["id"],
                    lat=lat,
                    lon=lon,
                    tags={str(k): str(v) for k, v in tags.items()},
                )
            )
        except ValueError as exc:
            logger.debug("Skipping POI out of range id=%s: %s", item.get("id"), exc)
    return nodes


def convert_pois(
    pois: Iterable[PoiNode],
    from_type: str,
    to_type: str,
    inverse_mode: str = "approximate",
) -> List[PoiNode]:
    """
    Convert POI coordinates; id and tags are kept as-is.
    """
    converter = converter_for(from_type, to_type, inverse_mode)
    converted = []
    for poi in pois:
        lat, lon = converter(poi.lat, poi.lon)
        converted.append(poi.model_copy(update={"lat": lat, "lon": lon}))
    return converted


def fetch_core_pois(
    base_url: Optional[str] = None,
    limit: Optional[int] = None,
    timeout: Optional[int] = None,
) -> List[PoiNode]:
    """
    Fetch POI nodes from the POI source (`GET /map/pois`).

    Coordinates are returned in the source's own system
    (settings.poi_source_coord_system); convert with convert_pois.
    """
    url = f"{(base_url or settings.poi_source_base_url).rstrip('/')}/map/pois"
    params = {"limit": limit or settings.poi_fetch_limit}
    logger.info("Requesting POI source: %s | limit=%s", url, params["limit"])

    try:
        resp = requests.get(url, params=params, timeout=timeout or settings.poi_source_timeout_s)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        logger.error("POI source request failed: %s", e)
        raise ExternalApiError("POI 数据源请求失败", original_error=str(e)) from e
    except ValueError as e:
        logger.error("POI source returned non-JSON body: %s", e)
        raise ExternalApiError("POI 数据源返回格式错误", original_error=str(e)) from e

    pois = parse_poi_nodes(data)
    logger.info("Loaded %s POIs from POI source", len(pois))
    return pois
