"""Error Handlers — turn raised errors into the {"error": {...}} envelope.

Invariants:
    - CustomerApiError answers with its own http_status and to_response() body
    - Malformed bodies / path params answer 400 with one entry per bad field
    - Anything else answers 500 with a fixed message; the exception text stays in the log
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import CustomerApiError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


async def handle_customer_api_error(request: Request, exc: CustomerApiError):
    logger.error(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
):
    logger.warning(
        f"Rejected request to {request.url.path}: {exc.errors()}",
        extra={"error_code": "INVALID_REQUEST", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=[_field_problem(e) for e in exc.errors()],
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
            "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


_HANDLERS = (
    (CustomerApiError, handle_customer_api_error),
    (RequestValidationError, handle_request_validation_error),
    (Exception, handle_unexpected_error),
)


def register_error_handlers(app: FastAPI) -> None:
    for exc_class, handler in _HANDLERS:
        app.add_exception_handler(exc_class, handler)


def _field_problem(error: dict) -> dict:
    return {
        "field": ".".join(str(loc) for loc in error["loc"]),
        "message": error["msg"],
        "type": error["type"],
    }


def _envelope(
    http_status: int, code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "status": http_status,
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }
