"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.schemas.common import NonEmptyStr
from domain.entities.profile import Education, Experience, ProfileWithOwner
from domain.services.profile_aggregator import ProfileInput


class ProfileRequest(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` is a comma-separated list. Blank optional fields are ignored
    rather than clearing the stored value.
    """

    status: NonEmptyStr
    skills: NonEmptyStr
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None
    twitter: str | None = None

    def to_input(self) -> ProfileInput:
        return ProfileInput(**self.model_dump())


class ExperienceCreate(BaseModel):
    """Schema for adding a work-history entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: NonEmptyStr
    company: NonEmptyStr
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_date_is_none(cls, value: Any) -> Any:
        return value or None

    def to_entity(self) -> Experience:
        return Experience(**self.model_dump())


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: NonEmptyStr
    degree: NonEmptyStr
    field_of_study: NonEmptyStr = Field(alias="fieldofstudy")
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_date_is_none(cls, value: Any) -> Any:
        return value or None

    def to_entity(self) -> Education:
        return Education(**self.model_dump())


class ExperienceResponse(ExperienceCreate):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    company: str


class EducationResponse(EducationCreate):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str = Field(alias="fieldofstudy")


class OwnerSummary(BaseModel):
    """The profile owner's public fields."""

    id: UUID
    name: str | None = None
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for a profile, with the owner's name and avatar when known."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    user: OwnerSummary
    status: str | None
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    githubusername: str | None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, item: ProfileWithOwner) -> "ProfileResponse":
        profile, owner = item.profile, item.owner
        return cls(
            id=profile.id,
            user=OwnerSummary(
                id=profile.user_id,
                name=owner.name if owner else None,
                avatar=owner.avatar if owner else None,
            ),
            status=profile.status,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            githubusername=profile.githubusername,
            skills=profile.skills,
            social=profile.social,
            experience=[ExperienceResponse.model_validate(e) for e in profile.experience],
            education=[EducationResponse.model_validate(e) for e in profile.education],
            created_at=profile.created_at,
        )
