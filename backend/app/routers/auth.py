"""Authentication endpoints for back-office access."""

from __future__ import annotations

from fastapi import APIRouter

from .. import schemas
from ..security import UserIdentity, authenticate_admin, create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=schemas.TokenResponse)
def obtain_access_token(payload: schemas.LoginRequest) -> schemas.TokenResponse:
    """Authenticate the administrator and return an access token."""

    identity: UserIdentity = authenticate_admin(
        payload.username,
        payload.password,
        payload.otp_code,
    )
    token = create_access_token(identity)
    return schemas.TokenResponse(access_token=token)
