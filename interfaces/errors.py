"""
Exception handlers that turn task errors into ``{"error": ...}`` responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.errors import TaskError, TaskNotFoundError

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON body"
INVALID_REQUEST_MESSAGE = "Invalid request"


async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    status_code = 404 if isinstance(exc, TaskNotFoundError) else 400
    logger.warning(f"{request.method} {request.url.path} -> {status_code} {exc.kind}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        message = INVALID_JSON_MESSAGE
    else:
        message = INVALID_REQUEST_MESSAGE
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=400, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskError, task_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
