"""Sparse profile field sets and merge-updates."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from domain.entities.profile import SOCIAL_NETWORKS, Profile

PROFILE_FIELDS = (
    "company",
    "website",
    "location",
    "bio",
    "status",
    "githubusername",
)


@dataclass(frozen=True)
class ProfileInput:
    """Raw create/update input; any field may be missing or blank."""

    status: str | None = None
    skills: str | None = None
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


def split_skills(skills: str) -> list[str]:
    """Turn ``"python, go ,rust"`` into ``["python", "go", "rust"]``."""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def build_profile_fields(data: ProfileInput) -> dict[str, Any]:
    """Keep only the fields that are present and non-empty.

    ``social`` is included only when at least one network link was given.
    """
    fields: dict[str, Any] = {}
    for name in PROFILE_FIELDS:
        value = getattr(data, name)
        if value:
            fields[name] = value

    if data.skills:
        skills = split_skills(data.skills)
        if skills:
            fields["skills"] = skills

    social = {name: getattr(data, name) for name in SOCIAL_NETWORKS if getattr(data, name)}
    if social:
        fields["social"] = social

    return fields


def apply_profile_fields(profile: Profile, fields: dict[str, Any]) -> Profile:
    """Merge a sparse field set into an existing profile in place.

    Fields absent from ``fields`` keep their stored value; social links
    merge key by key.
    """
    for name, value in fields.items():
        if name == "social":
            profile.social = {**profile.social, **value}
        else:
            setattr(profile, name, value)
    return profile


def new_profile(user_id: UUID, fields: dict[str, Any]) -> Profile:
    """Create a profile holding exactly the supplied fields."""
    return apply_profile_fields(Profile(user_id=user_id), fields)
