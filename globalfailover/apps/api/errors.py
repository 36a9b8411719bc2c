from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from globalfailover.apps.api.response import problem


logger = logging.getLogger(__name__)

_STATUS_CODES: dict[int, str] = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _STATUS_CODES.get(exc.status_code, "HTTP_ERROR")
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(problem(request, code, message), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only query parameters are validated; the evaluate body is an opaque trigger event.
    details = {"errors": [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]}
    return JSONResponse(problem(request, "REQUEST_VALIDATION_ERROR", "Invalid request", details), status_code=422)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_api_error path=%s", request.url.path, exc_info=exc)
    return JSONResponse(problem(request, "INTERNAL_ERROR", "Internal server error"), status_code=500)
