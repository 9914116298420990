from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

CoordTypeField = Literal["wgs84", "gcj02"]
InverseModeField = Literal["approximate", "iterative"]


class CoordPoint(BaseModel):
    lat: float = Field(..., description="纬度", ge=-90, le=90)
    lon: float = Field(..., description="经度", ge=-180, le=180)


class CoordConvertRequest(CoordPoint):
    """
    单点坐标转换请求
    """
    from_type: CoordTypeField = Field("wgs84", description="输入坐标系")
    to_type: CoordTypeField = Field("gcj02", description="输出坐标系")
    inverse_mode: Optional[InverseModeField] = Field(
        None,
        description="GCJ-02 -> WGS84 的反推方式，缺省使用服务配置",
    )


class CoordConvertResponse(BaseModel):
    lat: float
    lon: float
    from_type: CoordTypeField
    to_type: CoordTypeField
    in_china: bool = Field(..., description="输入点是否落在中国范围矩形内（决定是否发生偏移）")


class CoordBatchRequest(BaseModel):
    """
    批量坐标转换请求
    """
    points: List[CoordPoint] = Field(..., description="坐标点列表", min_length=1, max_length=10000)
    from_type: CoordTypeField = Field("wgs84", description="输入坐标系")
    to_type: CoordTypeField = Field("gcj02", description="输出坐标系")
    inverse_mode: Optional[InverseModeField] = None


class CoordBatchResponse(BaseModel):
    points: List[CoordPoint]
    count: int
    from_type: CoordTypeField
    to_type: CoordTypeField


class GeometryConvertRequest(BaseModel):
    """
    GeoJSON 几何转换请求，坐标顺序为 [lng, lat]
    """
    geometry: Dict[str, Any] = Field(..., description="GeoJSON geometry 对象")
    from_type: CoordTypeField = Field("wgs84", description="输入坐标系")
    to_type: CoordTypeField = Field("gcj02", description="输出坐标系")
    inverse_mode: Optional[InverseModeField] = None


class GeometryConvertResponse(BaseModel):
    geometry: Dict[str, Any]
    from_type: CoordTypeField
    to_type: CoordTypeField
