"""
Consolidated middleware and exception handlers for the AirChef API.

Handlers answer with the same ``{status, message}`` envelope as the routes.
Logical failures are reported with HTTP 200; only routing-level HTTP errors
(unknown path, wrong method) keep their own status code.
"""

import re
import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import MSG_INVALID_REQUEST, MSG_UNEXPECTED, error_response
from app.exceptions import StoreError

logger = logging.getLogger("airchef.middleware")


# ============================================================================
# Request Logging Middleware
# ============================================================================


# Meal routes that address a single record by id
_MEAL_PATH = re.compile(r"/api/(?P<operation>get|update|delete)/(?P<meal_id>[^/]+)/?$")
_OPERATIONS = {
    "/": "health",
    "/api/create": "create",
    "/api/get": "list",
    "/api/search": "search",
}


def describe_meal_request(path: str, prefix: str = "") -> dict:
    """Name the meal operation a path targets, with the meal id when it carries one.

    >>> describe_meal_request("/api/delete/5f1d7f1c2b3a4c5d6e7f8091")
    {'operation': 'delete', 'meal_id': '5f1d7f1c2b3a4c5d6e7f8091'}
    """
    if prefix and path.startswith(prefix):
        path = path[len(prefix):] or "/"
    match = _MEAL_PATH.match(path)
    if match:
        return match.groupdict()
    return {"operation": _OPERATIONS.get(path.rstrip("/") or "/", "unknown"), "meal_id": None}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every meal request with its operation, meal id and timing"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        prefix = request.app.state.settings.api_prefix
        context = {
            "request_id": request_id,
            "method": request.method,
            **describe_meal_request(request.url.path, prefix),
        }
        target = f"{context['operation']} {context['meal_id'] or ''}".strip()
        logger.info(f"{request.method} {target} started", extra=context)

        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"{request.method} {target} failed: {exc}",
                extra={**context, "process_time": f"{time.perf_counter() - start_time:.4f}s"},
                exc_info=True,
            )
            raise

        process_time = time.perf_counter() - start_time
        logger.info(
            f"{request.method} {target} completed in {process_time:.4f}s",
            extra={**context, "status_code": response.status_code},
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request bodies/params that cannot be parsed into the endpoint's input model"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=error_response(MSG_INVALID_REQUEST),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def store_exception_handler(request: Request, exc: StoreError):
    """Handle store errors that were not turned into an envelope by the route"""
    logger.warning(f"Store error on {request.url}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=error_response(exc.message),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=error_response(MSG_UNEXPECTED),
    )
