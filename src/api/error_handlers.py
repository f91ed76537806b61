# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/error_handlers.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Глобальные обработчики исключений.

Любая ошибка превращается в конверт
``{success: false, message, statusCode, errorCode, timestamp}``.
Для 5xx клиенту отдается общее сообщение, детали пишутся в лог.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.utils.exceptions import APIException, ErrorCode

GENERIC_ERROR_MESSAGE = "Internal server error"

_STATUS_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    status.HTTP_503_SERVICE_UNAVAILABLE: ErrorCode.STORE_UNAVAILABLE,
}


def error_code_for_status(status_code: int) -> str:
    """Код ошибки для HTTP исключений, не несущих собственного кода."""
    if status_code in _STATUS_ERROR_CODES:
        return _STATUS_ERROR_CODES[status_code].value
    if status_code >= 500:
        return ErrorCode.INTERNAL_ERROR.value
    return ErrorCode.HTTP_ERROR.value


def error_body(
    status_code: int,
    message: str,
    error_code: str,
    field: Optional[str] = None,
) -> dict:
    """
    Собрать тело ответа об ошибке.

    Args:
        status_code: HTTP статус
        message: Сообщение для клиента
        error_code: Машиночитаемый код ошибки
        field: Поле, вызвавшее конфликт (если известно)

    Returns:
        Словарь конверта ошибки в camelCase
    """
    body = {
        "success": False,
        "message": message,
        "statusCode": status_code,
        "errorCode": str(getattr(error_code, "value", error_code)),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if field:
        body["field"] = field
    return body


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = [str(loc) for loc in error.get("loc", ()) if loc not in ("body", "query", "path")]
        if location:
            parts.append(f"{'.'.join(location)}: {error.get('msg')}")
        else:
            parts.append(str(error.get("msg")))
    return "; ".join(parts) or "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Зарегистрировать все глобальные обработчики ошибок приложения."""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        message = exc.detail
        if exc.status_code >= 500:
            logger.opt(exception=exc).error(
                f"{exc.error_code} на {request.method} {request.url.path}: {exc.detail}"
            )
            if exc.error_code != ErrorCode.STORE_UNAVAILABLE:
                message = GENERIC_ERROR_MESSAGE
        else:
            logger.warning(
                f"{exc.error_code} на {request.method} {request.url.path}: {exc.detail}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                exc.status_code, message, exc.error_code, getattr(exc, "field", None)
            ),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        message = _format_validation_errors(exc)
        logger.warning(f"Ошибка валидации на {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                status.HTTP_400_BAD_REQUEST, message, ErrorCode.VALIDATION_ERROR
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = str(exc.detail)
        if exc.status_code >= 500:
            logger.error(f"HTTP {exc.status_code} на {request.url.path}: {exc.detail}")
            message = GENERIC_ERROR_MESSAGE
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                exc.status_code, message, error_code_for_status(exc.status_code)
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(
            f"Необработанное исключение на {request.method} {request.url.path}: {exc}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                GENERIC_ERROR_MESSAGE,
                ErrorCode.INTERNAL_ERROR,
            ),
        )
