import pytest

from app.core.auth_filter import Identity
from app.core.policy import Decision, evaluate, path_matches
from app.models.enums import UserRole


def identity(role: UserRole) -> Identity:
    return Identity(user_id=1, email="x@example.com", name="X", role=role)


def test_path_matches():
    assert path_matches("/api/**", "/api/courses/1")
    assert path_matches("/api/**", "/api")
    assert not path_matches("/api/**", "/apix")
    assert path_matches("/error", "/error")
    assert not path_matches("/error", "/error/500")


@pytest.mark.parametrize(
    "path",
    ["/api/users/login", "/create-order", "/api/public/x", "/static/a.css", "/health", "/error"],
)
def test_public_paths_permit_anonymous(path):
    assert evaluate(path, None) is Decision.PERMIT


def test_api_requires_authentication_only():
    assert evaluate("/api/courses", None) is Decision.UNAUTHENTICATED
    for role in UserRole:
        assert evaluate("/api/courses", identity(role)) is Decision.PERMIT


def test_admin_paths_need_admin_role():
    assert evaluate("/admin/x", None) is Decision.UNAUTHENTICATED
    assert evaluate("/admin/x", identity(UserRole.STUDENT)) is Decision.FORBIDDEN
    assert evaluate("/admin/x", identity(UserRole.INSTRUCTOR)) is Decision.FORBIDDEN
    assert evaluate("/admin/x", identity(UserRole.ADMIN)) is Decision.PERMIT


def test_user_paths_need_student_role():
    assert evaluate("/user/x", identity(UserRole.STUDENT)) is Decision.PERMIT
    assert evaluate("/user/x", identity(UserRole.ADMIN)) is Decision.FORBIDDEN


def test_api_rule_wins_over_admin_rule():
    # /api/** is matched first, so /api/admin/... only needs a login
    assert evaluate("/api/admin/upload/laptops", identity(UserRole.STUDENT)) is Decision.PERMIT


def test_everything_else_requires_authentication():
    assert evaluate("/somewhere", None) is Decision.UNAUTHENTICATED
    assert evaluate("/somewhere", identity(UserRole.STUDENT)) is Decision.PERMIT


def test_admin_ping_without_token(client):
    r = client.get("/admin/ping")
    assert r.status_code == 401
    assert r.json()["message"] == "Unauthorized access, authentication required"


def test_admin_ping_with_student_token(client, student_headers):
    r = client.get("/admin/ping", headers=student_headers)
    assert r.status_code == 403
    assert r.json()["message"] == "Access denied, insufficient permissions"


def test_admin_ping_with_admin_token(client, admin_headers):
    r = client.get("/admin/ping", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"msg": "admin ok", "user": "admin@example.com"}


def test_user_ping_roles(client, student_headers, instructor_headers):
    assert client.get("/user/ping", headers=student_headers).status_code == 200
    assert client.get("/user/ping", headers=instructor_headers).status_code == 403


def test_cors_preflight_from_allowed_origin(client):
    r = client.options(
        "/api/courses",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert r.headers["access-control-allow-credentials"] == "true"
    assert r.headers["access-control-max-age"] == "3600"


def test_health_is_public(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["x-request-id"] == "abc123"

    generated = client.get("/health").headers["x-request-id"]
    assert len(generated) == 12
