"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Education, Experience, Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get every profile."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create_if_absent(self, profile: Profile) -> Profile | None:
        """Insert a profile inside a savepoint.

        The unique constraint on ``user_id`` decides races: when another
        profile for the same user wins, the savepoint is rolled back and
        None is returned while the outer transaction stays usable.
        """
        model = self._to_model(profile)
        try:
            async with self._session.begin_nested():
                self._session.add(model)
                await self._session.flush()
        except IntegrityError:
            return None
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        model = await self._get_model(profile.user_id)

        if not model:
            raise ValueError(f"Profile for user {profile.user_id} not found")

        model.status = profile.status
        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.githubusername = profile.githubusername
        # Assign fresh containers so the JSON columns are flagged as changed
        model.skills = list(profile.skills)
        model.social = dict(profile.social)
        model.experience = [self._experience_to_doc(entry) for entry in profile.experience]
        model.education = [self._education_to_doc(entry) for entry in profile.education]

        await self._session.flush()
        return self._to_entity(model)

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete a user's profile."""
        model = await self._get_model(user_id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, user_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            githubusername=model.githubusername,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[self._experience_from_doc(doc) for doc in model.experience or []],
            education=[self._education_from_doc(doc) for doc in model.education or []],
            created_at=model.created_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            status=entity.status,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            bio=entity.bio,
            githubusername=entity.githubusername,
            skills=list(entity.skills),
            social=dict(entity.social),
            experience=[self._experience_to_doc(entry) for entry in entity.experience],
            education=[self._education_to_doc(entry) for entry in entity.education],
            created_at=entity.created_at,
        )

    @staticmethod
    def _experience_to_doc(entry: Experience) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "title": entry.title,
            "company": entry.company,
            "location": entry.location,
            "from": entry.from_date.isoformat(),
            "to": entry.to_date.isoformat() if entry.to_date else None,
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _experience_from_doc(doc: dict[str, Any]) -> Experience:
        return Experience(
            id=UUID(doc["id"]),
            title=doc["title"],
            company=doc["company"],
            location=doc.get("location"),
            from_date=date.fromisoformat(doc["from"]),
            to_date=date.fromisoformat(doc["to"]) if doc.get("to") else None,
            current=bool(doc.get("current", False)),
            description=doc.get("description"),
        )

    @staticmethod
    def _education_to_doc(entry: Education) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "school": entry.school,
            "degree": entry.degree,
            "fieldofstudy": entry.field_of_study,
            "from": entry.from_date.isoformat(),
            "to": entry.to_date.isoformat() if entry.to_date else None,
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _education_from_doc(doc: dict[str, Any]) -> Education:
        return Education(
            id=UUID(doc["id"]),
            school=doc["school"],
            degree=doc["degree"],
            field_of_study=doc["fieldofstudy"],
            from_date=date.fromisoformat(doc["from"]),
            to_date=date.fromisoformat(doc["to"]) if doc.get("to") else None,
            current=bool(doc.get("current", False)),
            description=doc.get("description"),
        )
