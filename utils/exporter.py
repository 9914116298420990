"""
POI 数据导出工具。
"""

from __future__ import annotations

import json
import logging
from io import BytesIO
from typing import Iterable

from openpyxl import Workbook

from modules.poi.core import poi_display_name
from modules.poi.schemas import PoiNode

logger = logging.getLogger(__name__)

HEADERS = [
    "ID",
    "名称",
    "经度",
    "纬度",
    "坐标系",
    "标签",
]


def _iter_rows(pois: Iterable[PoiNode], coord_type: str) -> Iterable[list]:
    for poi in pois:
        yield [
            str(poi.id),
            poi_display_name(poi.tags),
            poi.lon,
            poi.lat,
            coord_type,
            json.dumps(poi.tags, ensure_ascii=False) if poi.tags else "",
        ]


def export_pois_to_xlsx(pois: Iterable[PoiNode], coord_type: str) -> tuple[str, bytes]:
    """
    将 POI 列表导出为 xlsx，返回 (文件名, 文件字节)。
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "POI"
    ws.append(HEADERS)

    count = 0
    for row in _iter_rows(pois, coord_type):
        ws.append(row)
        count += 1

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)

    filename = f"pois_{coord_type}.xlsx"
    logger.info("导出 POI 数据为 xlsx: %s (%s rows)", filename, count)
    return filename, buffer.getvalue()
