"""
FastAPI主应用入口
职责：创建应用实例、集成中间件、挂载路由、处理请求生命周期
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from config import settings
from core.exceptions import BizError
from router import coords_router, misc_router, pois_router

# ==================== 配置日志 ====================
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(_: FastAPI):
    """应用生命周期管理"""
    logger.info("=" * 50)
    logger.info("应用启动中...")
    logger.info("POI 数据源: %s (%s)", settings.poi_source_base_url, settings.poi_source_coord_system)
    logger.info("GCJ-02 反推方式: %s", settings.gcj02_inverse_mode)
    logger.info("=" * 50)

    try:
        yield
    finally:
        logger.info("应用关闭中...")
        logger.info("应用已关闭")

# ==================== 创建FastAPI应用 ====================
app = FastAPI(
    title="坐标转换服务API",
    description="WGS84 与 GCJ-02（火星坐标系）之间的坐标、几何与 POI 转换",
    version="1.0.0",
    lifespan=lifespan,
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 开启Gzip压缩
app.add_middleware(GZipMiddleware, minimum_size=500)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    logger.error("Validation Error: %s", exc.body)
    logger.error("Errors: %s", exc.errors())
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc), "body": exc.body},
    )

@app.exception_handler(BizError)
async def biz_exception_handler(request, exc: BizError):
    logger.error("BizError: %s | Payload: %s", exc.message, exc.payload)
    return JSONResponse(
        status_code=exc.code,
        content={
            "status": "error",
            "message": exc.message,
            "detail": exc.payload
        },
    )


def jsonable_errors(exc: RequestValidationError):
    # pydantic 错误的 ctx 可能携带异常对象，无法直接序列化
    return [
        {key: value for key, value in err.items() if key != "ctx"}
        for err in exc.errors()
    ]

# ==================== API路由 ====================

app.include_router(misc_router)
app.include_router(coords_router)
app.include_router(pois_router)

# ==================== 主入口 ====================

if __name__ == "__main__":
    import uvicorn

    logger.info("启动FastAPI应用...")
    logger.info("访问地址: http://localhost:%s", settings.app_port)
    logger.info("API文档: http://localhost:%s/docs", settings.app_port)

    uvicorn.run(
        "main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
        log_level="info"
    )
