"""Authenticated caller reference."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Identity:
    """Opaque reference to an authenticated user.

    Carried inside every issued token and attached to each private request.
    Distinct from the full ``User`` record.
    """

    id: str


def parse_id(raw: str) -> UUID | None:
    """Parse a client-supplied id; anything malformed yields None."""
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        return None
