"""
数据库连接管理
提供异步数据库连接和会话管理
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker, AsyncEngine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from .config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def build_engine(url: str) -> AsyncEngine:
    """
    按驱动创建异步引擎
    SQLite 不支持连接池参数，内存库需要共享同一连接
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        return create_async_engine(url, echo=False, **kwargs)

    return create_async_engine(
        url,
        echo=False,  # 禁用 SQL 详细输出，避免日志过多
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


engine = build_engine(settings.db_url)

# 会话工厂
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)


class Base(DeclarativeBase):
    """模型基类"""
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """获取数据库会话（依赖注入用）"""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """初始化数据库（创建所有表，已存在的表会跳过）"""
    # 确保模型已注册到 Base.metadata
    from modules.blog import blog_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"数据库表初始化完成: {', '.join(Base.metadata.tables)}")


async def close_db():
    """关闭数据库连接"""
    await engine.dispose()
