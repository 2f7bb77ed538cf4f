"""Unit tests for AuthService."""

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from core.exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError
from domain.entities.identity import Identity
from domain.entities.user import User
from domain.services.auth_service import AuthService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def tokens() -> MagicMock:
    tokens = MagicMock()
    tokens.issue.return_value = "signed-token"
    return tokens


@pytest.fixture
def hasher() -> MagicMock:
    hasher = MagicMock()
    hasher.hash.side_effect = lambda password: f"hashed:{password}"
    hasher.verify.side_effect = lambda password, hashed: hashed == f"hashed:{password}"
    return hasher


@pytest.fixture
def service(uow: FakeUnitOfWork, tokens: MagicMock, hasher: MagicMock) -> AuthService:
    return AuthService(
        lambda: uow,
        token_service=tokens,
        password_hasher=hasher,
        avatar_for=lambda email: f"avatar:{email}",
    )


def _user(user_id: UUID, password: str = "hashed:secret123") -> User:
    return User(id=user_id, name="Jane", email="jane@example.com", password=password)


# --- register ---


class TestRegister:
    @pytest.mark.asyncio
    async def test_creates_user_and_returns_token(
        self, service: AuthService, uow: FakeUnitOfWork, tokens: MagicMock, user_id: UUID
    ):
        uow.users.get_by_email.return_value = None
        uow.users.create.side_effect = lambda user: user

        token = await service.register("Jane", "jane@example.com", "secret123")

        assert token == "signed-token"
        created = uow.users.create.call_args.args[0]
        assert created.password == "hashed:secret123"
        assert created.avatar == "avatar:jane@example.com"
        tokens.issue.assert_called_once_with(Identity(id=str(created.id)))
        assert uow.committed

    @pytest.mark.asyncio
    async def test_rejects_duplicate_email(
        self, service: AuthService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_by_email.return_value = _user(user_id)

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await service.register("Jane", "jane@example.com", "secret123")

        assert exc_info.value.status_code == 400
        uow.users.create.assert_not_called()
        assert not uow.committed


# --- authenticate ---


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_returns_token_for_right_password(
        self, service: AuthService, uow: FakeUnitOfWork, tokens: MagicMock, user_id: UUID
    ):
        uow.users.get_by_email.return_value = _user(user_id)

        token = await service.authenticate("jane@example.com", "secret123")

        assert token == "signed-token"
        tokens.issue.assert_called_once_with(Identity(id=str(user_id)))

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(
        self, service: AuthService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_by_email.return_value = _user(user_id)
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await service.authenticate("jane@example.com", "nope")

        uow.users.get_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await service.authenticate("nobody@example.com", "secret123")

        assert wrong_password.value.message == unknown_email.value.message


# --- get_user ---


class TestGetUser:
    @pytest.mark.asyncio
    async def test_returns_the_callers_record(
        self, service: AuthService, uow: FakeUnitOfWork, identity: Identity, user_id: UUID
    ):
        uow.users.get.return_value = _user(user_id)

        user = await service.get_user(identity)

        assert user.id == user_id
        uow.users.get.assert_called_once_with(user_id)

    @pytest.mark.asyncio
    async def test_deleted_user_is_not_found(
        self, service: AuthService, uow: FakeUnitOfWork, identity: Identity
    ):
        uow.users.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.get_user(identity)

    @pytest.mark.asyncio
    async def test_non_uuid_identity_is_not_found(
        self, service: AuthService, uow: FakeUnitOfWork
    ):
        with pytest.raises(UserNotFoundError):
            await service.get_user(Identity(id="not-a-uuid"))

        uow.users.get.assert_not_called()
