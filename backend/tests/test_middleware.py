"""
中间件单元测试
测试缓存控制、安全响应头和请求ID
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
class TestMiddleware:
    """中间件测试"""

    async def test_api_cache_control_headers(self, client: AsyncClient):
        """API 路径禁用浏览器缓存"""
        response = await client.get("/api/blogs")
        assert response.status_code == 200

        cc = response.headers.get("Cache-Control", "")
        assert "no-cache" in cc
        assert "no-store" in cc
        assert response.headers.get("Pragma") == "no-cache"
        assert response.headers.get("Expires") == "0"

    async def test_security_headers(self, client: AsyncClient):
        response = await client.get("/api/blogs")

        assert response.headers.get("X-Content-Type-Options") == "nosniff"
        assert response.headers.get("X-Frame-Options") == "DENY"
        assert response.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"

    async def test_request_id_headers(self, client: AsyncClient):
        response = await client.get("/api/blogs", headers={"X-Request-ID": "abc123"})

        assert response.headers.get("X-Request-ID") == "abc123"
        assert response.headers.get("X-Response-Time", "").endswith("ms")

    async def test_health_skips_request_logging(self, client: AsyncClient):
        """健康检查不经过请求日志，也不强制禁用缓存"""
        response = await client.get("/health")

        assert "X-Request-ID" not in response.headers
        assert "no-store" not in response.headers.get("Cache-Control", "")

    async def test_error_request_logged(self, client: AsyncClient, caplog):
        with caplog.at_level("WARNING", logger="core.middleware"):
            response = await client.get("/api/blogs/999")

        assert response.status_code == 404
        assert any("[请求错误]" in r.message for r in caplog.records)
