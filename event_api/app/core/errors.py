"""
API errors and the handlers that render them.

Every error response has the same shape, ``{"message": "..."}``.  Domain
code raises ``ApiError`` subclasses; framework errors (unknown routes,
unsupported methods, body validation) and unexpected exceptions are
converted to the same shape here.  Unexpected exceptions are logged
with their traceback and reported as a plain 500 without details.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"message": self.message}


class NotFoundError(ApiError):
    """Raised when a lookup by id matches nothing."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, label: str) -> None:
        super().__init__(f"{label} not found")
        self.label = label


class MethodNotAllowedError(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self) -> None:
        super().__init__(METHOD_NOT_ALLOWED_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.debug("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = METHOD_NOT_ALLOWED_MESSAGE
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request data", "errors": _format_validation_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def _format_validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    # Drop the leading "body"/"path" location marker; clients only care
    # about the field name.
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"][1:]) or str(error["loc"][0]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
