import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.core.auth_filter import Identity, extract_bearer_token
from app.core.deps import get_token_service, get_user_service
from app.core.errors import ConflictError
from app.core.permissions import get_current_identity
from app.core.security import TokenService
from app.schemas.auth import LoginRequest, LoginResponse, RegisterResponse, TokenIntrospection
from app.schemas.user import StatusUpdate, UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Email and password are required"},
        401: {"description": "Invalid email or password"},
    },
)
def login(
    payload: LoginRequest,
    users: UserService = Depends(get_user_service),
    tokens: TokenService = Depends(get_token_service),
):
    if not payload.email or not payload.email.strip() or not payload.password or not payload.password.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"login": "fail", "message": "Email and password are required"},
        )

    user = users.authenticate(payload.email, payload.password)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"login": "fail", "message": "Invalid email or password"},
        )

    users.touch_last_active(user)
    token = tokens.issue(user.email)
    logger.info("Login successful for: %s", user.email)

    return LoginResponse(
        login="success",
        token=token,
        role=user.role.value,
        user_id=str(user.id),
        name=user.name,
    )


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Email already in use"},
    },
)
def register(payload: UserCreate, users: UserService = Depends(get_user_service)):
    try:
        user = users.create(payload)
    except ConflictError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"register": "fail", "message": exc.message},
        )
    return RegisterResponse(register_="success", user_id=str(user.id))


@router.get("/verify-token", response_model=TokenIntrospection, response_model_exclude_none=True)
def verify_token(
    request: Request,
    users: UserService = Depends(get_user_service),
    tokens: TokenService = Depends(get_token_service),
):
    """Diagnostic view of the bearer token sent with this request."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        return _introspection(
            status.HTTP_401_UNAUTHORIZED,
            token_present=False,
            message="No token provided in Authorization header",
        )

    email = tokens.extract_subject(token)
    if email is None:
        return _introspection(
            status.HTTP_401_UNAUTHORIZED,
            token_present=True,
            message="Could not extract email from token",
        )

    user = users.get_by_email(email)
    if user is None:
        return _introspection(
            status.HTTP_401_UNAUTHORIZED,
            token_present=True,
            email=email,
            user_found=False,
            message=f"User not found with email: {email}",
        )

    valid = tokens.validate(token, email)
    return _introspection(
        status.HTTP_200_OK if valid else status.HTTP_401_UNAUTHORIZED,
        token_present=True,
        email=email,
        user_found=True,
        user_id=user.id,
        user_role=user.role.value,
        token_valid=valid,
        expires_at=tokens.extract_expiration(token),
        message=None if valid else "Token is invalid or expired",
    )


def _introspection(status_code: int, **fields) -> JSONResponse:
    body = TokenIntrospection(**fields).model_dump(mode="json", by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.get("/me", response_model=UserRead)
def me(
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
):
    return users.get(identity.user_id)


@router.get("", response_model=list[UserRead])
def list_users(users: UserService = Depends(get_user_service)):
    return users.list_all()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, users: UserService = Depends(get_user_service)):
    return users.create(payload)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return users.get(user_id)


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, payload: UserUpdate, users: UserService = Depends(get_user_service)):
    return users.update(user_id, payload)


@router.put("/{user_id}/status", response_model=UserRead)
def update_user_status(
    user_id: int,
    payload: StatusUpdate,
    users: UserService = Depends(get_user_service),
):
    return users.update_status(user_id, payload.status)


@router.delete("/{user_id}")
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    users.delete(user_id)
    return {"message": "User deleted successfully"}
