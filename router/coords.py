import asyncio
import logging

from fastapi import APIRouter

from config import settings
from modules.coord_transform import converter_for, out_of_china, transform_geometry
from modules.coord_transform.schemas import (
    CoordBatchRequest,
    CoordBatchResponse,
    CoordConvertRequest,
    CoordConvertResponse,
    GeometryConvertRequest,
    GeometryConvertResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/coords", tags=["Coordinate Transform"])


@router.post(
    "/convert",
    response_model=CoordConvertResponse,
    summary="单点坐标转换",
    description="在 WGS84 与 GCJ-02 之间转换单个坐标点，中国范围外的点原样返回。",
)
async def convert_point(payload: CoordConvertRequest):
    inverse_mode = payload.inverse_mode or settings.gcj02_inverse_mode
    converter = converter_for(payload.from_type, payload.to_type, inverse_mode)
    lat, lon = converter(payload.lat, payload.lon)
    logger.debug(
        "Converted %s(%s,%s) -> %s(%s,%s)",
        payload.from_type, payload.lat, payload.lon, payload.to_type, lat, lon,
    )
    return {
        "lat": lat,
        "lon": lon,
        "from_type": payload.from_type,
        "to_type": payload.to_type,
        "in_china": not out_of_china(payload.lat, payload.lon),
    }


@router.post(
    "/batch",
    response_model=CoordBatchResponse,
    summary="批量坐标转换",
)
async def convert_batch(payload: CoordBatchRequest):
    inverse_mode = payload.inverse_mode or settings.gcj02_inverse_mode
    converter = converter_for(payload.from_type, payload.to_type, inverse_mode)

    def _convert_all():
        points = []
        for pt in payload.points:
            lat, lon = converter(pt.lat, pt.lon)
            points.append({"lat": lat, "lon": lon})
        return points

    points = await asyncio.to_thread(_convert_all)
    logger.info("批量转换完成: %s 个点, %s -> %s", len(points), payload.from_type, payload.to_type)
    return {
        "points": points,
        "count": len(points),
        "from_type": payload.from_type,
        "to_type": payload.to_type,
    }


@router.post(
    "/geometry",
    response_model=GeometryConvertResponse,
    summary="GeoJSON 几何坐标转换",
    description="转换 GeoJSON geometry 的全部顶点，坐标顺序为 [lng, lat]。",
)
async def convert_geometry(payload: GeometryConvertRequest):
    inverse_mode = payload.inverse_mode or settings.gcj02_inverse_mode
    geometry = await asyncio.to_thread(
        transform_geometry,
        payload.geometry,
        payload.from_type,
        payload.to_type,
        inverse_mode,
    )
    return {
        "geometry": geometry,
        "from_type": payload.from_type,
        "to_type": payload.to_type,
    }
