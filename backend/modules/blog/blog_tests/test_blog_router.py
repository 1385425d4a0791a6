# -*- coding: utf-8 -*-
"""
博客 API 路由测试
"""

import pytest
from httpx import AsyncClient

from conftest import create_test_blog


@pytest.mark.asyncio
class TestBlogAPI:
    """/api/blogs 资源接口"""

    async def test_list_empty(self, client: AsyncClient):
        response = await client.get("/api/blogs")
        assert response.status_code == 200
        assert response.json() == []

    async def test_create(self, client: AsyncClient, blog_data):
        response = await client.post("/api/blogs", json=blog_data)
        assert response.status_code == 201

        data = response.json()
        assert data["id"] >= 1
        assert data["title"] == blog_data["title"]
        assert data["content"] == blog_data["content"]
        assert "created_at" in data and "updated_at" in data

    async def test_create_missing_field(self, client: AsyncClient):
        response = await client.post("/api/blogs", json={"title": "A"})
        assert response.status_code == 400

        body = response.json()
        assert body["code"] == 3001
        assert any(e["field"].endswith("content") for e in body["data"]["errors"])

    async def test_create_empty_title(self, client: AsyncClient):
        response = await client.post("/api/blogs", json={"title": "", "content": "B"})
        assert response.status_code == 400

        listing = await client.get("/api/blogs")
        assert listing.json() == []

    async def test_show(self, client: AsyncClient):
        created = await create_test_blog(client, "A", "B")

        response = await client.get(f"/api/blogs/{created['id']}")
        assert response.status_code == 200
        assert response.json()["title"] == "A"

    async def test_show_unknown(self, client: AsyncClient):
        response = await client.get("/api/blogs/99")
        assert response.status_code == 404
        assert response.json()["code"] == 4001

    async def test_update(self, client: AsyncClient):
        created = await create_test_blog(client, "A", "B")

        response = await client.put(f"/api/blogs/{created['id']}", json={"title": "A2", "content": "B"})
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert response.json()["title"] == "A2"

    async def test_update_unknown(self, client: AsyncClient):
        response = await client.put("/api/blogs/99", json={"title": "A", "content": "B"})
        assert response.status_code == 404

    async def test_update_unknown_with_empty_title_is_rejected_by_schema(self, client: AsyncClient):
        """请求体校验先于查找文章"""
        response = await client.put("/api/blogs/99", json={"title": "", "content": "B"})
        assert response.status_code == 400
        assert response.json()["code"] == 3001

    async def test_update_empty_content(self, client: AsyncClient):
        created = await create_test_blog(client, "A", "B")

        response = await client.put(f"/api/blogs/{created['id']}", json={"title": "A", "content": ""})
        assert response.status_code == 400

    async def test_delete(self, client: AsyncClient):
        created = await create_test_blog(client)

        response = await client.delete(f"/api/blogs/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        second = await client.delete(f"/api/blogs/{created['id']}")
        assert second.status_code == 404

    async def test_crud_scenario(self, client: AsyncClient):
        """create -> update -> delete，每步后列表与预期一致"""
        created = await create_test_blog(client, "A", "B")
        assert created["id"] == 1

        listing = (await client.get("/api/blogs")).json()
        assert [(b["id"], b["title"], b["content"]) for b in listing] == [(1, "A", "B")]

        await client.put("/api/blogs/1", json={"title": "A2", "content": "B"})
        listing = (await client.get("/api/blogs")).json()
        assert [(b["id"], b["title"], b["content"]) for b in listing] == [(1, "A2", "B")]

        await client.delete("/api/blogs/1")
        assert (await client.get("/api/blogs")).json() == []
