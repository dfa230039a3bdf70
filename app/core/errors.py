import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


# Also a ValueError so pydantic validators can raise it and get a 400.
class InvalidArgumentError(AppError, ValueError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid argument"


class UpstreamError(AppError):
    default_message = "Upstream service failure"


class PaymentGatewayError(UpstreamError):
    default_message = "Payment gateway error"


def _message_body(message: str) -> dict:
    return {"message": message}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        logger.warning("%s %s failed upstream: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_message_body(exc.message))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_message_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = first.get("msg", "Invalid request")
        # "Value error, <msg>" is how pydantic wraps ValueError text
        message = message.removeprefix("Value error, ")
        if field:
            message = f"{field}: {message}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_message_body(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_message_body(str(exc) or "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
