"""FastAPI exception handlers that map errors to HTTP responses.

Every error body has the shape ``{"statusCode": ..., "message": ..., "error"?: ...}``.
Register them from the app factory with ``register_exception_handlers(app)``.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import PersistenceErrorCode
from app.infrastructure.database.errors import classify_database_error, error_message

logger = logging.getLogger(__name__)


def _error_body(status_code: int, message: object, *, with_reason: bool = True) -> dict:
    body = {"statusCode": status_code, "message": message}
    if with_reason:
        try:
            body["error"] = HTTPStatus(status_code).phrase
        except ValueError:
            body["error"] = ""
    return body


async def default_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for errors nothing else knows how to report: 500."""
    logger.error(
        "Unhandled %s for %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            with_reason=False,
        ),
    )


async def database_error_handler(request: Request, exc: DBAPIError) -> JSONResponse:
    """Translate known persistence errors; delegate the rest to the fallback."""
    code = classify_database_error(exc)

    if code is PersistenceErrorCode.UNIQUE_VIOLATION:
        message = error_message(exc)
        logger.info("Unique constraint violation for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_error_body(
                status.HTTP_409_CONFLICT,
                f"A unique constraint would be violated on Article. Details: {message}",
                with_reason=False,
            ),
        )

    return await default_exception_handler(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 Bad Request with one "field: reason" line per failed constraint."""
    messages = []
    for error in exc.errors():
        # first loc element is the source ("body", "path", "query")
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(status.HTTP_400_BAD_REQUEST, messages),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Exception is served by ServerErrorMiddleware, which still re-raises after responding
    app.add_exception_handler(Exception, default_exception_handler)
    app.add_exception_handler(DBAPIError, database_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
