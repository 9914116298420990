"""
配置管理模块
使用Pydantic Settings从环境变量加载配置
"""

from typing import List, Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类
    从环境变量加载配置，支持类型转换和验证
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 未声明的 env 变量忽略，不抛出校验错误
    )

    # 应用配置
    app_host: str = "0.0.0.0"  # 应用主机地址，默认0.0.0.0（允许外部访问）
    app_port: int = 8000  # 应用端口，默认8000
    log_level: str = Field(
        "INFO",
        validation_alias="LOG_LEVEL",
        description="日志级别",
    )

    # CORS跨域配置
    cors_origins: List[str] = ["*"]  # 允许访问的域名列表

    # POI 数据源配置
    poi_source_base_url: str = Field(
        "http://127.0.0.1:3000",
        validation_alias="POI_SOURCE_BASE_URL",
        description="POI 数据源服务地址（提供 /map/pois）",
    )
    poi_source_timeout_s: int = Field(
        30,
        validation_alias="POI_SOURCE_TIMEOUT_S",
        description="POI 数据源请求超时时间（秒）",
    )
    poi_source_coord_system: Literal["gcj02", "wgs84"] = Field(
        "wgs84",
        validation_alias="POI_SOURCE_COORD_SYSTEM",
        description="POI 数据源返回坐标所使用的坐标系",
    )
    poi_fetch_limit: int = Field(
        1000,
        validation_alias="POI_FETCH_LIMIT",
        description="单次拉取 POI 的最大数量",
    )

    # 坐标转换配置
    gcj02_inverse_mode: Literal["approximate", "iterative"] = Field(
        "approximate",
        validation_alias="GCJ02_INVERSE_MODE",
        description="GCJ-02 反推 WGS84 的默认方式：approximate（单步近似）或 iterative（迭代）",
    )


settings = Settings()
