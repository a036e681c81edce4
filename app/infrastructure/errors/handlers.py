from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.infrastructure.errors.base import StorageError, ValidationError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

API_PREFIX = "/api"

ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Something went wrong</title></head>
<body><h1>Something went wrong</h1><p>Please try again later.</p></body>
</html>"""


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if not _is_api_request(request):
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return HTMLResponse(ERROR_PAGE, status_code=exc.status_code)
        return HTMLResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    invalid_fields = {str(error["loc"][-1]) for error in exc.errors() if error.get("loc")}
    message = "Invalid email address" if "email" in invalid_fields else ValidationError.detail

    logger.info(
        "request_validation_failed",
        path=request.url.path,
        fields=sorted(invalid_fields),
    )
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=error_body(message),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    if _is_api_request(request):
        return JSONResponse(
            status_code=StorageError.status_code,
            content=error_body(StorageError.detail),
        )
    return HTMLResponse(ERROR_PAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
