"""
健康检查路由
"""

import time
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from core.config import get_settings
from core.database import engine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["健康检查"])


class ComponentHealth(BaseModel):
    """组件健康状态"""
    status: str
    message: Optional[str] = None
    latency_ms: Optional[float] = None


class HealthStatus(BaseModel):
    """健康状态响应"""
    status: str  # healthy, unhealthy
    version: str
    timestamp: str
    uptime_seconds: float
    components: dict


# 系统启动时间
_start_time = datetime.utcnow()


async def check_database() -> ComponentHealth:
    """检查数据库连接"""
    start = time.time()
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"数据库健康检查失败: {e}")
        return ComponentHealth(status="unhealthy", message=f"数据库连接失败: {e}")

    return ComponentHealth(
        status="healthy",
        message="数据库连接正常",
        latency_ms=round((time.time() - start) * 1000, 2)
    )


@router.get("/health", response_model=HealthStatus)
async def health_check():
    """
    健康检查端点
    用于负载均衡器和监控系统
    """
    db_health = await check_database()
    now = datetime.utcnow()

    return HealthStatus(
        status=db_health.status,
        version=get_settings().app_version,
        timestamp=now.isoformat(),
        uptime_seconds=round((now - _start_time).total_seconds(), 2),
        components={"database": db_health.model_dump()}
    )
