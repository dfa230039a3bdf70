from fastapi import APIRouter, Depends

from app.core.auth_filter import Identity
from app.core.permissions import get_current_identity

# Role checks for these prefixes live in app.core.policy (/admin/** and /user/**).
admin_router = APIRouter()
user_router = APIRouter()


@admin_router.get("/ping")
def admin_ping(identity: Identity = Depends(get_current_identity)):
    return {"msg": "admin ok", "user": identity.email}


@user_router.get("/ping")
def user_ping(identity: Identity = Depends(get_current_identity)):
    return {"msg": "user ok", "user": identity.email}
