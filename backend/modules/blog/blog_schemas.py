"""
博客数据验证模式
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class BlogPostWrite(BaseModel):
    """创建/更新文章（PUT 为整体替换，两个字段都必填）"""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)


class BlogPostInfo(BaseModel):
    """文章信息"""
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
