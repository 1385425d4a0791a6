"""
博客API路由
资源路由：index / store / show / update / destroy
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from .blog_schemas import BlogPostWrite, BlogPostInfo
from .blog_services import BlogService

router = APIRouter()


@router.get("", response_model=List[BlogPostInfo])
async def list_blogs(db: AsyncSession = Depends(get_db)):
    """获取全部文章"""
    service = BlogService(db)
    posts = await service.list_all()
    return [BlogPostInfo.model_validate(p) for p in posts]


@router.post("", response_model=BlogPostInfo, status_code=status.HTTP_201_CREATED)
async def create_blog(data: BlogPostWrite, db: AsyncSession = Depends(get_db)):
    """创建文章"""
    service = BlogService(db)
    post = await service.create(data.title, data.content)
    return BlogPostInfo.model_validate(post)


@router.get("/{blog_id}", response_model=BlogPostInfo)
async def get_blog(blog_id: int, db: AsyncSession = Depends(get_db)):
    """获取文章详情"""
    service = BlogService(db)
    post = await service.get(blog_id)
    return BlogPostInfo.model_validate(post)


@router.put("/{blog_id}", response_model=BlogPostInfo)
async def update_blog(blog_id: int, data: BlogPostWrite, db: AsyncSession = Depends(get_db)):
    """更新文章"""
    service = BlogService(db)
    post = await service.update(blog_id, data.title, data.content)
    return BlogPostInfo.model_validate(post)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: int, db: AsyncSession = Depends(get_db)):
    """删除文章"""
    service = BlogService(db)
    await service.delete(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
