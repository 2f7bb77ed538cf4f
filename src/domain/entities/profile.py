"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.entities.user import User

SOCIAL_NETWORKS = ("youtube", "facebook", "instagram", "linkedin", "twitter")


@dataclass(frozen=True)
class Experience:
    """A work-history entry on a profile."""

    title: str
    company: str
    from_date: date
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class Education:
    """An education entry on a profile."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass
class Profile:
    """Domain entity for a developer profile, one per user."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    status: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def owner_id(self) -> UUID:
        return self.user_id


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owner's record."""

    profile: Profile
    owner: Optional[User]
