"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Like:
    """A single like, at most one per user per post."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)

    @property
    def owner_id(self) -> UUID:
        return self.user_id


@dataclass(frozen=True)
class Comment:
    """A comment embedded in a post."""

    user_id: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def owner_id(self) -> UUID:
        return self.user_id


@dataclass
class Post:
    """Domain entity for a Post.

    ``likes`` and ``comments`` are ordered most-recent-first.
    """

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def owner_id(self) -> UUID:
        return self.user_id
