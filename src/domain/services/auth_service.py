"""Registration, login and current-user lookup."""

from collections.abc import Callable

from core.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from domain.entities.identity import Identity, parse_id
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import IPasswordHasher, ITokenService


class AuthService:
    """Service layer for account and credential logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
        avatar_for: Callable[[str], str],
    ) -> None:
        self._uow_factory = uow_factory
        self._tokens = token_service
        self._hasher = password_hasher
        self._avatar_for = avatar_for

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a token for it."""
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise UserAlreadyExistsError(email)

            user = User(
                name=name,
                email=email,
                avatar=self._avatar_for(email),
                password=self._hasher.hash(password),
            )
            created = await uow.users.create(user)
            await uow.commit()

        return self._tokens.issue(Identity(id=str(created.id)))

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a fresh token.

        Unknown emails and wrong passwords fail identically.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user or not self._hasher.verify(password, user.password):
            raise InvalidCredentialsError()

        return self._tokens.issue(Identity(id=str(user.id)))

    async def get_user(self, identity: Identity) -> User:
        """Resolve the caller's identity to their user record."""
        user_id = parse_id(identity.id)
        if user_id is None:
            raise UserNotFoundError(identity.id)

        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)

        if not user:
            raise UserNotFoundError(identity.id)
        return user
