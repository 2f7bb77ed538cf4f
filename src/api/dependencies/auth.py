"""Authentication dependencies for FastAPI."""

from typing import Annotated

import structlog
from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader

from core.config import settings
from core.exceptions import MissingCredentialError
from domain.entities.identity import Identity
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.password import BcryptPasswordHasher

# Security scheme for OpenAPI docs
token_header = APIKeyHeader(name=settings.auth_token_header, auto_error=False)

# Singleton auth collaborators
_token_service: JWTAuthProvider | None = None
_password_hasher: BcryptPasswordHasher | None = None


def get_token_service() -> JWTAuthProvider:
    """Get or create the token service singleton."""
    global _token_service
    if _token_service is None:
        _token_service = JWTAuthProvider()
    return _token_service


def get_password_hasher() -> BcryptPasswordHasher:
    """Get or create the password hasher singleton."""
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = BcryptPasswordHasher()
    return _password_hasher


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Security(token_header)],
    token_service: JWTAuthProvider = Depends(get_token_service),
) -> Identity:
    """
    Dependency guarding private routes.

    Reads the token header, verifies it and attaches the identity to the
    request. Nothing downstream runs when this raises.

    Raises:
        MissingCredentialError: If no token was sent
        InvalidTokenError: If the token fails signature, shape or expiry checks
    """
    if not token:
        raise MissingCredentialError()

    identity = token_service.verify(token)

    request.state.identity = identity
    structlog.contextvars.bind_contextvars(user_id=identity.id)
    return identity


# Type alias for convenience in route handlers
CurrentUser = Annotated[Identity, Depends(get_current_user)]
