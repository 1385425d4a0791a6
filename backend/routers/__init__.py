"""
路由目录
"""

from . import health, user

__all__ = ["health", "user"]
