"""
博客接口客户端
基于 httpx 的异步封装，对应 /api/blogs 资源路由
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from core.config import get_settings
from .blog_state import BlogItem

logger = logging.getLogger(__name__)

BLOGS_PATH = "/api/blogs"


class ClientError(Exception):
    """客户端请求失败"""


class NetworkError(ClientError):
    """传输层失败（连接失败、超时等）"""


class ApiStatusError(ClientError):
    """服务端返回非 2xx 状态"""

    def __init__(self, status_code: int, message: str, code: Optional[int] = None):
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class InvalidResponseError(ClientError):
    """2xx 响应体不是预期的 JSON 结构"""


def _error_from_response(resp: httpx.Response) -> ApiStatusError:
    """从统一错误结构 {code, message, data} 中提取信息"""
    code = None
    message = resp.reason_phrase or "request failed"
    try:
        body = resp.json()
        if isinstance(body, dict):
            code = body.get("code")
            message = body.get("message") or message
    except ValueError:
        pass
    return ApiStatusError(resp.status_code, message, code)


def _parse_item(resp: httpx.Response) -> BlogItem:
    try:
        return BlogItem.model_validate(resp.json())
    except (ValueError, ValidationError) as e:
        raise InvalidResponseError(f"HTTP {resp.status_code}: invalid blog body: {e}") from e


def _parse_items(resp: httpx.Response) -> List[BlogItem]:
    try:
        body = resp.json()
        if not isinstance(body, list):
            raise ValueError(f"expected a list, got {type(body).__name__}")
        return [BlogItem.model_validate(item) for item in body]
    except (ValueError, ValidationError) as e:
        raise InvalidResponseError(f"HTTP {resp.status_code}: invalid blog list: {e}") from e


class BlogApi:
    """
    博客资源接口

    Usage:
        async with BlogApi("http://localhost:8000") as api:
            blogs = await api.list_all()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        if client is None:
            settings = get_settings()
            client = httpx.AsyncClient(
                base_url=base_url or settings.client_base_url,
                timeout=timeout if timeout is not None else settings.client_timeout,
                transport=transport,
                headers={"Accept": "application/json"}
            )
        self._client = client

    async def __aenter__(self) -> "BlogApi":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, json=json)
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {path}: {e}") from e

        logger.debug(f"{method} {path} -> {resp.status_code}")
        if resp.is_error:
            raise _error_from_response(resp)
        return resp

    async def list_all(self) -> List[BlogItem]:
        resp = await self._request("GET", BLOGS_PATH)
        return _parse_items(resp)

    async def get(self, blog_id: int) -> BlogItem:
        resp = await self._request("GET", f"{BLOGS_PATH}/{blog_id}")
        return _parse_item(resp)

    async def create(self, title: str, content: str) -> BlogItem:
        resp = await self._request("POST", BLOGS_PATH, {"title": title, "content": content})
        return _parse_item(resp)

    async def update(self, blog_id: int, title: str, content: str) -> BlogItem:
        resp = await self._request("PUT", f"{BLOGS_PATH}/{blog_id}", {"title": title, "content": content})
        return _parse_item(resp)

    async def delete(self, blog_id: int) -> None:
        await self._request("DELETE", f"{BLOGS_PATH}/{blog_id}")
