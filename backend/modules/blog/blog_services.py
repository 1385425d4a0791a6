"""
博客业务逻辑
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from core.errors import ErrorCode, NotFoundException, ValidationException
from .blog_models import BlogPost

logger = logging.getLogger(__name__)


def _require_fields(title: Optional[str], content: Optional[str]):
    """标题与内容均不能为空"""
    errors = []
    if not title:
        errors.append({"field": "title", "message": "标题不能为空"})
    if not content:
        errors.append({"field": "content", "message": "内容不能为空"})
    if errors:
        raise ValidationException(errors=errors)


class BlogService:
    """博客服务"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[BlogPost]:
        """获取所有文章（按创建顺序）"""
        result = await self.db.execute(select(BlogPost).order_by(BlogPost.id))
        return list(result.scalars().all())

    async def find(self, post_id: int) -> Optional[BlogPost]:
        result = await self.db.execute(
            select(BlogPost).where(BlogPost.id == post_id)
        )
        return result.scalar_one_or_none()

    async def get(self, post_id: int) -> BlogPost:
        """获取文章，不存在时抛出 NotFoundException"""
        post = await self.find(post_id)
        if post is None:
            raise NotFoundException("文章", post_id, code=ErrorCode.BLOG_POST_NOT_FOUND)
        return post

    async def create(self, title: str, content: str) -> BlogPost:
        """创建文章"""
        _require_fields(title, content)

        post = BlogPost(title=title, content=content)
        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        logger.info(f"创建文章: {post.id}")
        return post

    async def update(self, post_id: int, title: str, content: str) -> BlogPost:
        """更新文章标题与内容，ID 不变"""
        post = await self.get(post_id)
        _require_fields(title, content)

        post.title = title
        post.content = content
        await self.db.commit()
        await self.db.refresh(post)
        logger.info(f"更新文章: {post_id}")
        return post

    async def delete(self, post_id: int) -> None:
        """删除文章（物理删除）"""
        post = await self.get(post_id)
        await self.db.delete(post)
        await self.db.commit()
        logger.info(f"删除文章: {post_id}")
