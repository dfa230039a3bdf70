"""
Static authorization policy.

Rules are matched in order against the request path and the first match
wins. Runs after ``AuthenticationMiddleware`` has populated
``request.state.identity``.
"""

import enum
import logging
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.auth_filter import Identity, get_request_identity
from app.models.enums import UserRole

logger = logging.getLogger(__name__)


class Requirement(enum.Enum):
    PERMIT = "permit"
    AUTHENTICATED = "authenticated"
    AUTHORITY = "authority"


class Decision(enum.Enum):
    PERMIT = "permit"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Rule:
    patterns: tuple[str, ...]
    requirement: Requirement
    authority: str | None = None

    def matches(self, path: str) -> bool:
        return any(path_matches(pattern, path) for pattern in self.patterns)


def path_matches(pattern: str, path: str) -> bool:
    """Exact match, or ``/prefix/**`` matching the prefix and anything below it."""
    if pattern.endswith("/**"):
        prefix = pattern[:-3]
        return path == prefix or path.startswith(prefix + "/")
    return path == pattern


RULES: tuple[Rule, ...] = (
    Rule(
        (
            "/api/users/login",
            "/api/users/register",
            "/api/users/verify-token",
            "/login",
            "/logout",
            "/api/create-order",
            "/api/verify-payment",
            "/create-order",
            "/verify-payment",
            "/api/public/**",
            "/error",
            "/static/**",
            "/css/**",
            "/js/**",
            "/images/**",
            "/favicon.ico",
            "/health",
            "/docs",
            "/docs/**",
            "/redoc",
            "/openapi.json",
        ),
        Requirement.PERMIT,
    ),
    Rule(("/api/**",), Requirement.AUTHENTICATED),
    Rule(("/admin/**",), Requirement.AUTHORITY, UserRole.ADMIN.authority),
    Rule(("/user/**",), Requirement.AUTHORITY, UserRole.STUDENT.authority),
)

DEFAULT_RULE = Rule(("/**",), Requirement.AUTHENTICATED)

UNAUTHORIZED_MESSAGE = "Unauthorized access, authentication required"
FORBIDDEN_MESSAGE = "Access denied, insufficient permissions"


def find_rule(path: str) -> Rule:
    for rule in RULES:
        if rule.matches(path):
            return rule
    return DEFAULT_RULE


def evaluate(path: str, identity: Identity | None) -> Decision:
    rule = find_rule(path)
    if rule.requirement is Requirement.PERMIT:
        return Decision.PERMIT
    if identity is None:
        return Decision.UNAUTHENTICATED
    if rule.requirement is Requirement.AUTHORITY and not identity.has_authority(rule.authority):
        return Decision.FORBIDDEN
    return Decision.PERMIT


class AuthorizationMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        decision = evaluate(path, get_request_identity(request))

        if decision is Decision.UNAUTHENTICATED:
            logger.info("Unauthorized access to: %s", path)
            return JSONResponse(status_code=401, content={"message": UNAUTHORIZED_MESSAGE})
        if decision is Decision.FORBIDDEN:
            logger.info("Access denied to: %s", path)
            return JSONResponse(status_code=403, content={"message": FORBIDDEN_MESSAGE})

        return await call_next(request)
