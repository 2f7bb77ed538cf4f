"""User registration API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.services import get_auth_service
from api.schemas.auth import RegisterRequest, TokenResponse
from domain.services.auth_service import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "Account created, token issued"},
        400: {"description": "Email already registered or malformed body"},
    },
)
async def register(
    data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Create an account.

    The avatar is derived from the email's gravatar.
    """
    token = await auth_service.register(data.name, data.email, data.password)
    return TokenResponse(token=token)
