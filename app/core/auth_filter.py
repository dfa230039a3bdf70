"""
Request authentication.

Runs once per request before routing. It never rejects anything: it only
decides whether the request carries a usable bearer token and, if so,
attaches an ``Identity`` to ``request.state.identity``. Whether the request
may proceed is decided afterwards by ``app.core.policy``.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.core.security import TokenService
from app.models.enums import UserRole
from app.models.user import User

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

PUBLIC_PATHS = frozenset(
    {
        "/api/users/login",
        "/api/users/register",
        "/api/users/verify-token",
        "/login",
        "/logout",
        "/create-order",
        "/verify-payment",
        "/api/create-order",
        "/api/verify-payment",
    }
)

STATIC_PREFIXES = ("/static/", "/js/", "/css/", "/images/", "/api/public/", "/error")
STATIC_SUFFIXES = (".png", ".jpg", ".css", ".js", ".ico")


@dataclass(frozen=True)
class Identity:
    user_id: int
    email: str
    name: str
    role: UserRole

    @property
    def authorities(self) -> tuple[str, ...]:
        return (self.role.authority,)

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities


def should_bypass(method: str, path: str) -> bool:
    if method == "OPTIONS":
        return True
    if path in PUBLIC_PATHS:
        return True
    return (
        path.startswith(STATIC_PREFIXES)
        or path == "/favicon.ico"
        or "swagger" in path
        or path.endswith(STATIC_SUFFIXES)
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return None


def resolve_identity(
    token: str,
    tokens: TokenService,
    find_user: Callable[[str], User | None],
) -> Identity | None:
    """Turn a raw token into an identity, or None if it does not check out."""
    email = tokens.extract_subject(token)
    if email is None:
        logger.debug("No subject in bearer token")
        return None

    user = find_user(email)
    if user is None:
        logger.debug("User not found with email: %s", email)
        return None

    if not tokens.validate(token, email):
        logger.debug("Token validation failed for: %s", email)
        return None

    return Identity(user_id=user.id, email=user.email, name=user.name, role=user.role)


def get_request_identity(request: Request) -> Identity | None:
    return getattr(request.state, "identity", None)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, token_service: TokenService, session_factory: sessionmaker):
        super().__init__(app)
        self.token_service = token_service
        self.session_factory = session_factory

    def _authenticate(self, token: str) -> Identity | None:
        db: Session = self.session_factory()
        try:
            return resolve_identity(
                token,
                self.token_service,
                lambda email: db.query(User).filter(User.email == email).first(),
            )
        finally:
            db.close()

    async def dispatch(self, request: Request, call_next):
        request.state.identity = get_request_identity(request)

        if should_bypass(request.method, request.url.path):
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is not None and request.state.identity is None:
            try:
                request.state.identity = await run_in_threadpool(self._authenticate, token)
            except Exception:
                logger.exception("Error in authentication filter for %s", request.url.path)
                request.state.identity = None

        return await call_next(request)
