import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised by the store when the unique email index rejects a write."""

    def __init__(self, email: str | None = None):
        self.email = email
        super().__init__("Employee with this email already exists")


def _field_name(loc: tuple) -> str:
    # drop the leading "body"/"query"/"path" segment FastAPI puts on every loc
    return ".".join(str(p) for p in (loc[1:] or loc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON bodies are client errors, reported as 400 rather than 422."""
    logger.warning("Rejected request on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "message": "Invalid request body",
                "errors": [
                    {"field": _field_name(tuple(e["loc"])), "code": e["type"], "message": e["msg"]}
                    for e in exc.errors()
                ],
            }
        },
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc) or "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
