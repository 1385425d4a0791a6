"""
当前用户路由
返回调用者身份，未认证请求被拒绝
"""

from fastapi import APIRouter, Depends

from core.security import get_current_user, TokenData

router = APIRouter(prefix="/api", tags=["用户"])


@router.get("/user", response_model=TokenData)
async def current_user(user: TokenData = Depends(get_current_user)):
    """获取当前登录用户"""
    return user
