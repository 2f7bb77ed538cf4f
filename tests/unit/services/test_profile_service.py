"""Unit tests for ProfileService."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from core.exceptions import NotFoundError, ProfileNotFoundError
from domain.entities.identity import Identity
from domain.entities.profile import Education, Experience, Profile
from domain.entities.user import User
from domain.services.profile_aggregator import ProfileInput
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    uow.profiles.update.side_effect = lambda profile: profile
    return ProfileService(lambda: uow)


@pytest.fixture
def owner(user_id: UUID) -> User:
    return User(id=user_id, name="Jane", email="jane@example.com", password="hashed", avatar="a")


@pytest.fixture
def profile(user_id: UUID) -> Profile:
    return Profile(user_id=user_id, status="Developer", skills=["python"])


def _experience(title: str = "Engineer") -> Experience:
    return Experience(title=title, company="Acme", from_date=date(2020, 1, 1))


# --- reads ---


class TestReads:
    @pytest.mark.asyncio
    async def test_get_mine_includes_owner(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity,
        profile: Profile, owner: User,
    ):
        uow.profiles.get_by_user.return_value = profile
        uow.users.get.return_value = owner

        result = await service.get_mine(identity)

        assert result.profile is profile
        assert result.owner is owner

    @pytest.mark.asyncio
    async def test_get_mine_without_profile_is_not_found(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_mine(identity)

        assert exc_info.value.message == "Profile not found"

    @pytest.mark.asyncio
    async def test_get_by_malformed_user_id_is_not_found(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        with pytest.raises(ProfileNotFoundError):
            await service.get_by_user("12345")

        uow.profiles.get_by_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_all_fetches_owners_in_one_call(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, owner: User
    ):
        orphan = Profile(user_id=uuid4())
        uow.profiles.get_all.return_value = [profile, orphan]
        uow.users.get_many.return_value = {owner.id: owner}

        result = await service.list_all()

        uow.users.get_many.assert_called_once_with([profile.user_id, orphan.user_id])
        assert result[0].owner is owner
        assert result[1].owner is None


# --- upsert ---


class TestUpsert:
    @pytest.mark.asyncio
    async def test_creates_when_absent(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None
        uow.profiles.create_if_absent.side_effect = lambda p: p

        result = await service.upsert(
            identity, ProfileInput(status="Developer", skills="python, go", twitter="t")
        )

        assert result.user_id == user_id
        assert result.skills == ["python", "go"]
        assert result.social == {"twitter": "t"}
        uow.profiles.update.assert_not_called()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_merges_when_present(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        profile.company = "Acme"
        uow.profiles.get_by_user.return_value = profile

        result = await service.upsert(identity, ProfileInput(status="Senior", skills="rust"))

        assert result.status == "Senior"
        assert result.skills == ["rust"]
        assert result.company == "Acme"
        uow.profiles.create_if_absent.assert_not_called()

    @pytest.mark.asyncio
    async def test_lost_insert_race_falls_back_to_merge(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        profile.company = "Acme"
        uow.profiles.get_by_user.side_effect = [None, profile]
        uow.profiles.create_if_absent.return_value = None

        result = await service.upsert(identity, ProfileInput(status="Senior", skills="go"))

        assert result is profile
        assert result.status == "Senior"
        assert result.company == "Acme"
        uow.profiles.update.assert_called_once()
        assert uow.committed


# --- delete_account ---


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_removes_posts_profile_and_user(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, user_id: UUID
    ):
        uow.posts.delete_all_for_user.return_value = 3

        await service.delete_account(identity)

        uow.posts.delete_all_for_user.assert_called_once_with(user_id)
        uow.profiles.delete_for_user.assert_called_once_with(user_id)
        uow.users.delete.assert_called_once_with(user_id)
        assert uow.committed


# --- experience / education ---


class TestExperience:
    @pytest.mark.asyncio
    async def test_add_goes_first(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        older = _experience("Junior")
        profile.experience = [older]
        uow.profiles.get_by_user.return_value = profile

        result = await service.add_experience(identity, _experience("Senior"))

        assert [e.title for e in result.experience] == ["Senior", "Junior"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_remove_by_id(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        keep, drop = _experience("keep"), _experience("drop")
        profile.experience = [keep, drop]
        uow.profiles.get_by_user.return_value = profile

        result = await service.remove_experience(identity, str(drop.id))

        assert result.experience == [keep]

    @pytest.mark.asyncio
    async def test_remove_unknown_id_changes_nothing(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        entry = _experience()
        profile.experience = [entry]
        uow.profiles.get_by_user.return_value = profile

        with pytest.raises(NotFoundError) as exc_info:
            await service.remove_experience(identity, "not-an-id")

        assert exc_info.value.message == "Experience does not exist"
        assert profile.experience == [entry]
        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_without_profile_is_not_found(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(identity, _experience())


class TestEducation:
    @pytest.mark.asyncio
    async def test_add_and_remove(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        uow.profiles.get_by_user.return_value = profile
        entry = Education(
            school="MIT", degree="BSc", field_of_study="CS", from_date=date(2015, 9, 1)
        )

        added = await service.add_education(identity, entry)
        assert added.education == [entry]

        removed = await service.remove_education(identity, str(entry.id))
        assert removed.education == []

    @pytest.mark.asyncio
    async def test_remove_unknown_id_is_not_found(
        self, service: ProfileService, uow: FakeUnitOfWork, identity: Identity, profile: Profile
    ):
        uow.profiles.get_by_user.return_value = profile

        with pytest.raises(NotFoundError) as exc_info:
            await service.remove_education(identity, str(uuid4()))

        assert exc_info.value.message == "Education does not exist"
