import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.core.auth_filter import get_request_identity

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code in (401, 403):
        return logging.WARNING
    return logging.INFO


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request, tagged with the caller's email when known."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        start = time.monotonic()

        response = await call_next(request)

        duration_ms = (time.monotonic() - start) * 1000
        # identity is filled in by AuthenticationMiddleware further down the stack
        identity = get_request_identity(request)
        logger.log(
            _level_for(response.status_code),
            "[%s] %s %s -> %s %.1fms user=%s",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            identity.email if identity else "-",
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
