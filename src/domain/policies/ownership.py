"""Ownership checks for resources that a single user controls."""

from enum import Enum
from typing import Protocol
from uuid import UUID

from core.exceptions import UnauthorizedError
from domain.entities.identity import Identity


class OwnedResource(Protocol):
    """Anything with a single owning user (post, comment, profile)."""

    @property
    def owner_id(self) -> UUID: ...


class Decision(Enum):
    ALLOW = "allow"
    DENY = "deny"


def authorize(identity: Identity, resource: OwnedResource) -> Decision:
    """Allow only when the caller owns the resource."""
    if str(resource.owner_id) == identity.id:
        return Decision.ALLOW
    return Decision.DENY


def require_owner(
    identity: Identity,
    resource: OwnedResource,
    message: str = "User not authorized",
) -> None:
    """Raise ``UnauthorizedError`` unless ``identity`` owns ``resource``."""
    if authorize(identity, resource) is Decision.DENY:
        raise UnauthorizedError(message)
