"""
错误处理模块测试
"""

from fastapi import status
from fastapi.responses import JSONResponse

from core.errors import (
    ErrorCode,
    AppException,
    ValidationException,
    NotFoundException,
    ERROR_MESSAGES
)


class TestErrors:
    """错误处理测试"""

    def test_error_codes(self):
        """测试错误码定义"""
        assert ErrorCode.SUCCESS == 0
        assert ErrorCode.INTERNAL_ERROR == 1000
        assert ErrorCode.VALIDATION_ERROR == 3001
        assert ErrorCode.BLOG_POST_NOT_FOUND == 4001

    def test_app_exception(self):
        """测试应用异常基类"""
        exc = AppException(code=ErrorCode.RESOURCE_NOT_FOUND)
        assert exc.http_status == status.HTTP_404_NOT_FOUND
        assert exc.message == ERROR_MESSAGES[ErrorCode.RESOURCE_NOT_FOUND]
        assert exc.to_dict() == {
            "code": ErrorCode.RESOURCE_NOT_FOUND,
            "message": ERROR_MESSAGES[ErrorCode.RESOURCE_NOT_FOUND],
            "data": None
        }

        resp = exc.to_response()
        assert isinstance(resp, JSONResponse)
        assert resp.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_code_defaults_to_500(self):
        exc = AppException(code=9999)
        assert exc.http_status == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.message == "未知错误"

    def test_validation_exception(self):
        exc = ValidationException(errors=[{"field": "title"}])
        assert exc.code == ErrorCode.VALIDATION_ERROR
        assert exc.http_status == status.HTTP_400_BAD_REQUEST
        assert exc.data == {"errors": [{"field": "title"}]}

    def test_not_found_exception(self):
        exc = NotFoundException(resource="文章", resource_id=7, code=ErrorCode.BLOG_POST_NOT_FOUND)
        assert exc.code == ErrorCode.BLOG_POST_NOT_FOUND
        assert exc.http_status == status.HTTP_404_NOT_FOUND
        assert "ID: 7" in exc.message
        assert exc.data == {"id": 7}
