"""
博客数据模型
表名遵循隔离协议：blog_前缀
"""

from datetime import datetime
from sqlalchemy import String, Integer, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base


class BlogPost(Base):
    """博客文章"""
    __tablename__ = "blog_posts"
    __table_args__ = {"extend_existing": True, "comment": "博客文章表"}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, onupdate=datetime.now)

    def __repr__(self) -> str:
        return f"<BlogPost {self.id} {self.title!r}>"
