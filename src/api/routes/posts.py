"""Post API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_post_service
from api.schemas.common import MessageResponse
from api.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
)
async def create_post(
    data: PostCreate,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post as the caller."""
    post = await post_service.create(user, data.text)
    return PostResponse.from_entity(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
)
async def list_posts(
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """Get every post, newest first."""
    posts = await post_service.list_all()
    return [PostResponse.from_entity(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"description": "Post not found"}},
)
async def get_post(
    post_id: str,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await post_service.get(post_id)
    return PostResponse.from_entity(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        401: {"description": "Caller is not the post's author"},
        404: {"description": "Post not found"},
    },
)
async def delete_post(
    post_id: str,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may."""
    await post_service.delete(post_id, user)
    return MessageResponse(msg="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={400: {"description": "Post already liked"}},
)
async def like_post(
    post_id: str,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Like a post and return its updated likes."""
    likes = await post_service.like(post_id, user)
    return [LikeResponse.from_entity(like) for like in likes]


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    summary="Unlike a post",
    responses={400: {"description": "Post has not yet been liked"}},
)
async def unlike_post(
    post_id: str,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Remove the caller's like and return the remaining likes."""
    likes = await post_service.unlike(post_id, user)
    return [LikeResponse.from_entity(like) for like in likes]


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
)
async def add_comment(
    post_id: str,
    data: CommentCreate,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Add a comment and return the post's comments, newest first."""
    comments = await post_service.add_comment(post_id, user, data.text)
    return [CommentResponse.from_entity(comment) for comment in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        401: {"description": "Caller is not the comment's author"},
        404: {"description": "Post or comment not found"},
    },
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """
    Delete a comment.

    Only the comment's author may delete it; owning the post is not enough.
    """
    comments = await post_service.delete_comment(post_id, comment_id, user)
    return [CommentResponse.from_entity(comment) for comment in comments]
