import asyncio
import logging
from io import BytesIO
from typing import Literal, Optional

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from config import settings
from modules.poi import convert_pois, fetch_core_pois
from modules.poi.schemas import PoiConvertRequest, PoiListResponse
from utils import export_pois_to_xlsx

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/pois", tags=["POI"])


@router.get(
    "",
    response_model=PoiListResponse,
    summary="获取核心 POI",
    description="从 POI 数据源拉取 POI，并转换到请求的坐标系。",
)
async def list_core_pois(
    coord_type: Literal["wgs84", "gcj02"] = Query("gcj02", description="输出坐标系"),
    limit: Optional[int] = Query(None, gt=0, le=10000, description="最大数量，缺省使用服务配置"),
):
    pois = await asyncio.to_thread(fetch_core_pois, None, limit)
    pois = convert_pois(
        pois,
        settings.poi_source_coord_system,
        coord_type,
        settings.gcj02_inverse_mode,
    )
    return {"pois": pois, "count": len(pois), "coord_type": coord_type}


@router.post(
    "/convert",
    response_model=PoiListResponse,
    summary="POI 坐标转换",
)
async def convert_poi_list(payload: PoiConvertRequest):
    inverse_mode = payload.inverse_mode or settings.gcj02_inverse_mode
    pois = await asyncio.to_thread(
        convert_pois, payload.pois, payload.from_type, payload.to_type, inverse_mode
    )
    return {"pois": pois, "count": len(pois), "coord_type": payload.to_type}


@router.post(
    "/export",
    summary="导出 POI 为 xlsx",
)
async def export_poi_list(payload: PoiConvertRequest):
    """转换坐标后导出为 xlsx 文件。"""
    inverse_mode = payload.inverse_mode or settings.gcj02_inverse_mode
    pois = convert_pois(payload.pois, payload.from_type, payload.to_type, inverse_mode)
    filename, content = await asyncio.to_thread(export_pois_to_xlsx, pois, payload.to_type)
    return StreamingResponse(
        BytesIO(content),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
