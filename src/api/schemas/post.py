"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.schemas.common import NonEmptyStr
from domain.entities.post import Comment, Like, Post


class PostCreate(BaseModel):
    """Schema for creating a post."""

    text: NonEmptyStr


class CommentCreate(BaseModel):
    """Schema for adding a comment to a post."""

    text: NonEmptyStr


class LikeResponse(BaseModel):
    id: UUID
    user: UUID

    @classmethod
    def from_entity(cls, like: Like) -> "LikeResponse":
        return cls(id=like.id, user=like.user_id)


class CommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    user: UUID
    text: str
    name: str | None
    avatar: str | None
    created_at: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            user=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )


class PostResponse(BaseModel):
    """Schema for a post with its likes and comments, newest first."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "user": "456e4567-e89b-12d3-a456-426614174000",
                "text": "Just shipped my first FastAPI service",
                "name": "Jane Doe",
                "avatar": "//www.gravatar.com/avatar/abc?s=200&r=pg&d=mm",
                "likes": [],
                "comments": [],
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UUID
    text: str
    name: str | None
    avatar: str | None
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created_at: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            user=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[LikeResponse.from_entity(like) for like in post.likes],
            comments=[CommentResponse.from_entity(comment) for comment in post.comments],
            created_at=post.created_at,
        )
