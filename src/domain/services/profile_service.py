"""Profile service layer with business logic."""

import logging
from collections.abc import Callable
from uuid import UUID

from core.exceptions import ProfileNotFoundError, UserNotFoundError
from domain.entities.identity import Identity, parse_id
from domain.entities.profile import Education, Experience, Profile, ProfileWithOwner
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import subdocument_editor
from domain.services.profile_aggregator import (
    ProfileInput,
    apply_profile_fields,
    build_profile_fields,
    new_profile,
)

logger = logging.getLogger(__name__)


class ProfileService:
    """Service layer for profiles and account removal."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_mine(self, identity: Identity) -> ProfileWithOwner:
        """Get the caller's own profile."""
        return await self.get_by_user(identity.id)

    async def get_by_user(self, user_id: str) -> ProfileWithOwner:
        """Get a profile by its owner's id."""
        owner_id = parse_id(user_id)
        if owner_id is None:
            raise ProfileNotFoundError(user_id)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(owner_id)
            if not profile:
                raise ProfileNotFoundError(user_id)
            owner = await uow.users.get(owner_id)

        return ProfileWithOwner(profile=profile, owner=owner)

    async def list_all(self) -> list[ProfileWithOwner]:
        """Get every profile with its owner's name and avatar."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            owners = await uow.users.get_many([profile.user_id for profile in profiles])

        return [
            ProfileWithOwner(profile=profile, owner=owners.get(profile.user_id))
            for profile in profiles
        ]

    async def upsert(self, identity: Identity, data: ProfileInput) -> Profile:
        """Create the caller's profile, or merge the given fields into it.

        Fields left out of ``data`` keep their stored values.
        """
        user_id = self._caller_id(identity)
        fields = build_profile_fields(data)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if profile is None:
                created = await uow.profiles.create_if_absent(new_profile(user_id, fields))
                if created is not None:
                    await uow.commit()
                    return created

                # Lost an insert race; the winner's row is now visible
                logger.info("Concurrent profile insert for user %s, merging", user_id)
                profile = await uow.profiles.get_by_user(user_id)
                if profile is None:
                    raise ProfileNotFoundError(identity.id)

            updated = await uow.profiles.update(apply_profile_fields(profile, fields))
            await uow.commit()
            return updated

    async def delete_account(self, identity: Identity) -> None:
        """Remove the caller's posts, profile and user record together."""
        user_id = self._caller_id(identity)

        async with self._uow_factory() as uow:
            removed_posts = await uow.posts.delete_all_for_user(user_id)
            await uow.profiles.delete_for_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("Deleted account %s and %d posts", user_id, removed_posts)

    async def add_experience(self, identity: Identity, entry: Experience) -> Profile:
        """Add a work-history entry at the head of the list."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, identity)
            profile.experience = subdocument_editor.append(profile.experience, entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def remove_experience(self, identity: Identity, exp_id: str) -> Profile:
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, identity)
            profile.experience = subdocument_editor.remove_by_id(
                profile.experience,
                exp_id,
                not_found_message="Experience does not exist",
            )
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def add_education(self, identity: Identity, entry: Education) -> Profile:
        """Add an education entry at the head of the list."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, identity)
            profile.education = subdocument_editor.append(profile.education, entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def remove_education(self, identity: Identity, edu_id: str) -> Profile:
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, identity)
            profile.education = subdocument_editor.remove_by_id(
                profile.education,
                edu_id,
                not_found_message="Education does not exist",
            )
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    @staticmethod
    def _caller_id(identity: Identity) -> UUID:
        user_id = parse_id(identity.id)
        if user_id is None:
            raise UserNotFoundError(identity.id)
        return user_id

    async def _require_profile(self, uow: IUnitOfWork, identity: Identity) -> Profile:
        profile = await uow.profiles.get_by_user(self._caller_id(identity))
        if not profile:
            raise ProfileNotFoundError(identity.id)
        return profile
