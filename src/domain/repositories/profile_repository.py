"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile documents."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every profile."""
        ...

    async def create_if_absent(self, profile: Profile) -> Profile | None:
        """Insert a profile unless the user already has one.

        Returns None when another profile for the same user already exists,
        including one inserted concurrently.
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        ...

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete a user's profile and return success status."""
        ...
