from datetime import datetime

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="健康检查")
async def health_check():
    """检查服务是否正常运行"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": "1.0.0",
    }


@router.get("/", summary="根路径")
async def root():
    """返回欢迎信息"""
    return {
        "message": "欢迎使用坐标转换服务 API",
        "docs": "/docs",
        "health": "/health",
    }
