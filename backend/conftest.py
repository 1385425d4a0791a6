"""
测试配置和 Fixtures
提供测试用的数据库会话、客户端和通用工具
"""

import os
import sys

# 在导入任何项目模块之前设置测试环境变量
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("JWT_SECRET", "test-secret-key")

# 确保可以导入项目模块
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, get_db
from main import app
from modules.blog import blog_models  # noqa: F401  注册模型


# 使用 SQLite 内存数据库进行测试
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    创建测试用数据库会话
    每个测试使用独立的内存库，并注入到 FastAPI 依赖中
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )

    async with session_factory() as session:
        async def _get_test_db():
            yield session

        app.dependency_overrides[get_db] = _get_test_db

        yield session
        await session.rollback()

        app.dependency_overrides.clear()

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """创建异步测试客户端（连接测试数据库）"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def blog_data() -> dict:
    """测试文章数据"""
    return {"title": "第一篇文章", "content": "文章内容"}


# ==================== 工具函数 ====================

async def create_test_blog(client: AsyncClient, title: str = "A", content: str = "B") -> dict:
    """通过接口创建文章并返回响应数据"""
    response = await client.post("/api/blogs", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()
