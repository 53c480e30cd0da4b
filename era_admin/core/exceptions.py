"""錯誤類型與 API 錯誤回應

所有錯誤在 API 邊界轉換為 {"error": "..."}，不會再往外拋。
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


class DirectoryError(Exception):
    """目錄資料錯誤基礎類別"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DirectoryError):
    """必填欄位缺少或格式錯誤"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DirectoryError):
    """找不到對應的資料"""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(DirectoryError):
    """建立時名稱重複"""
    status_code = status.HTTP_409_CONFLICT


class StoreError(DirectoryError):
    """資料庫或檔案系統錯誤"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    else:
        logger.warning("{} {} rejected ({}): {}", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 只回報第一個錯誤，格式與其他 400 相同
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """註冊所有錯誤處理器"""
    app.add_exception_handler(DirectoryError, directory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
