"""Authentication API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_auth_service
from api.schemas.auth import LoginRequest, TokenResponse, UserResponse
from domain.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the current user",
    responses={
        200: {"description": "The caller's user record, without the password"},
        401: {"description": "Missing or invalid token"},
    },
)
async def get_me(
    user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Get the user record of the token holder."""
    record = await auth_service.get_user(user)
    return UserResponse(
        id=record.id,
        name=record.name,
        email=record.email,
        avatar=record.avatar,
        created_at=record.created_at,
    )


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        200: {"description": "Credentials accepted, token issued"},
        400: {"description": "Invalid credentials or malformed body"},
    },
)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange an email and password for a fresh token."""
    token = await auth_service.authenticate(data.email, data.password)
    return TokenResponse(token=token)
