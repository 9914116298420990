from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field

class PoiNode(BaseModel):
    id: Union[int, str]
    lat: float = Field(..., description="纬度", ge=-90, le=90)
    lon: float = Field(..., description="经度", ge=-180, le=180)
    tags: Dict[str, str] = Field(default_factory=dict, description="OSM 风格标签，如 name / name:en")

class PoiConvertRequest(BaseModel):
    pois: List[PoiNode] = Field(..., description="POI list", min_length=1, max_length=10000)
    from_type: Literal["wgs84", "gcj02"] = Field("wgs84", description="Input coordinate system")
    to_type: Literal["wgs84", "gcj02"] = Field("gcj02", description="Output coordinate system")
    inverse_mode: Optional[Literal["approximate", "iterative"]] = Field(None, description="GCJ-02 -> WGS84 method")

class PoiListResponse(BaseModel):
    pois: List[PoiNode]
    count: int
    coord_type: Literal["wgs84", "gcj02"]
