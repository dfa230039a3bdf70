from fastapi import Depends, HTTPException, Request, status

from app.core.auth_filter import Identity, get_request_identity
from app.core.policy import FORBIDDEN_MESSAGE, UNAUTHORIZED_MESSAGE
from app.models.enums import UserRole


def get_current_identity(request: Request) -> Identity:
    identity = get_request_identity(request)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
        )
    return identity


def require_role(*roles: UserRole):
    def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=FORBIDDEN_MESSAGE,
            )
        return identity

    return dependency


require_admin = require_role(UserRole.ADMIN)
require_student = require_role(UserRole.STUDENT)
