"""
标准错误码体系
提供统一的错误码定义和异常处理
"""

import logging
from typing import Optional, Any, Dict
from enum import IntEnum
from fastapi import status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    """
    标准错误码

    错误码规范：
    - 0: 成功
    - 1xxx: 系统级错误
    - 2xxx: 认证/授权错误
    - 3xxx: 业务通用错误
    - 4xxx: 模块级错误
    """

    SUCCESS = 0

    # 系统级错误 (1xxx)
    INTERNAL_ERROR = 1000           # 服务器内部错误
    DATABASE_ERROR = 1001           # 数据库错误
    NETWORK_ERROR = 1008            # 网络错误

    # 认证/授权错误 (2xxx)
    UNAUTHORIZED = 2001             # 未认证（未登录）
    TOKEN_INVALID = 2003            # 令牌无效
    PERMISSION_DENIED = 2004        # 权限不足

    # 业务通用错误 (3xxx)
    VALIDATION_ERROR = 3001         # 参数验证失败
    RESOURCE_NOT_FOUND = 3002       # 资源不存在

    # 博客模块 (4000-4099)
    BLOG_POST_NOT_FOUND = 4001


# 错误码对应的默认消息
ERROR_MESSAGES: Dict[int, str] = {
    ErrorCode.SUCCESS: "操作成功",
    ErrorCode.INTERNAL_ERROR: "服务器内部错误，请稍后重试",
    ErrorCode.DATABASE_ERROR: "数据库操作失败",
    ErrorCode.NETWORK_ERROR: "网络连接错误",
    ErrorCode.UNAUTHORIZED: "请先登录",
    ErrorCode.TOKEN_INVALID: "无效的认证凭据",
    ErrorCode.PERMISSION_DENIED: "没有权限执行此操作",
    ErrorCode.VALIDATION_ERROR: "参数验证失败",
    ErrorCode.RESOURCE_NOT_FOUND: "请求的资源不存在",
    ErrorCode.BLOG_POST_NOT_FOUND: "文章不存在",
}

# 错误码对应的 HTTP 状态码
ERROR_HTTP_STATUS: Dict[int, int] = {
    ErrorCode.SUCCESS: status.HTTP_200_OK,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.DATABASE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.NETWORK_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BLOG_POST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class AppException(Exception):
    """
    应用异常基类

    Usage:
        raise AppException(ErrorCode.RESOURCE_NOT_FOUND, "文章不存在")
        raise ValidationException(errors=[{"field": "title", "message": "不能为空"}])
    """

    def __init__(
        self,
        code: int = ErrorCode.INTERNAL_ERROR,
        message: Optional[str] = None,
        data: Any = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "未知错误")
        self.data = data
        self.http_status = ERROR_HTTP_STATUS.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data
        }

    def to_response(self) -> JSONResponse:
        """转换为 JSONResponse"""
        return JSONResponse(status_code=self.http_status, content=self.to_dict())


class ValidationException(AppException):
    """参数验证异常"""

    def __init__(self, message: str = "参数验证失败", errors: Optional[list] = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            data={"errors": errors} if errors else None
        )


class NotFoundException(AppException):
    """资源不存在异常"""

    def __init__(
        self,
        resource: str = "资源",
        resource_id: Any = None,
        code: int = ErrorCode.RESOURCE_NOT_FOUND
    ):
        message = f"{resource}不存在"
        if resource_id is not None:
            message = f"{resource} (ID: {resource_id}) 不存在"
        super().__init__(code=code, message=message, data={"id": resource_id} if resource_id is not None else None)


# ==================== 异常处理器 ====================

def register_exception_handlers(app):
    """
    注册异常处理器

    在 main.py 中调用：
        from core.errors import register_exception_handlers
        register_exception_handlers(app)
    """
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException as StarletteHTTPException

    @app.exception_handler(AppException)
    async def handle_app_exception(request, exc: AppException):
        return exc.to_response()

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"]
            }
            for error in exc.errors()
        ]
        return ValidationException(errors=errors).to_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request, exc: StarletteHTTPException):
        # 映射 HTTP 状态码到业务错误码
        code_mapping = {
            401: ErrorCode.UNAUTHORIZED,
            403: ErrorCode.PERMISSION_DENIED,
            404: ErrorCode.RESOURCE_NOT_FOUND,
            500: ErrorCode.INTERNAL_ERROR,
        }

        code = code_mapping.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
        message = str(exc.detail) if exc.detail else ERROR_MESSAGES.get(code, "请求失败")

        return JSONResponse(
            status_code=exc.status_code,
            content={"code": code, "message": message, "data": None},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request, exc: Exception):
        logger.error(f"未处理异常: {exc}", exc_info=True)
        return AppException(ErrorCode.INTERNAL_ERROR).to_response()
