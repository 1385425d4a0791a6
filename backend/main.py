"""
Blog Manager - 主入口
基于FastAPI的博客管理后端

- 博客资源接口 /api/blogs
- 当前用户接口 /api/user
- 请求日志 / 安全响应头中间件
- 标准化错误处理
- 健康检查端点
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import get_settings
from core.database import init_db, close_db
from core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from core.errors import register_exception_handlers

settings = get_settings()

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

# 减少第三方库的日志输出
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    current_settings = get_settings()
    logger.info(f"🚀 正在启动 {current_settings.app_name} v{current_settings.app_version}...")

    await init_db()

    logger.info(f"🎉 {current_settings.app_name} 启动完成!")
    yield

    logger.info("🛑 系统关闭中...")
    await close_db()
    logger.info("👋 系统已关闭")


# ==================== 创建应用 ====================
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="博客文章管理接口",
    lifespan=lifespan
)


# ==================== 中间件配置（后添加的先执行） ====================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    RequestLoggingMiddleware,
    slow_request_threshold=settings.slow_request_threshold
)


# ==================== 异常处理器 ====================
register_exception_handlers(app)


# ==================== 注册路由 ====================
from routers import health, user
from modules.blog.blog_router import router as blog_router

app.include_router(health.router)
app.include_router(user.router)
app.include_router(blog_router, prefix="/api/blogs", tags=["博客"])


@app.get("/api", include_in_schema=False)
async def api_info():
    """API 信息"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }


# ==================== 启动入口 ====================
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
