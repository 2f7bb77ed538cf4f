"""Post service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import PostNotFoundError, UserNotFoundError
from domain.entities.identity import Identity, parse_id
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.policies.ownership import require_owner
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import subdocument_editor


class PostService:
    """Service layer for posts and their likes and comments."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, identity: Identity, text: str) -> Post:
        """Create a post, stamped with the author's current name and avatar."""
        async with self._uow_factory() as uow:
            author = await self._require_user(uow, identity)
            post = Post(
                user_id=author.id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            created = await uow.posts.create(post)
            await uow.commit()
            return created

    async def list_all(self) -> list[Post]:
        """Get every post, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get(self, post_id: str) -> Post:
        """Get a single post."""
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def delete(self, post_id: str, identity: Identity) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            require_owner(identity, post)

            await uow.posts.delete(post.id)
            await uow.commit()

    async def like(self, post_id: str, identity: Identity) -> list[Like]:
        """Like a post; each user may like a post once."""
        caller_id = self._caller_id(identity)
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            post.likes = subdocument_editor.add_toggle(
                post.likes,
                identity,
                lambda _: Like(user_id=caller_id),
                message="Post already liked",
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def unlike(self, post_id: str, identity: Identity) -> list[Like]:
        """Withdraw the caller's like."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            post.likes = subdocument_editor.remove_toggle(
                post.likes,
                identity,
                message="Post has not yet been liked",
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def add_comment(self, post_id: str, identity: Identity, text: str) -> list[Comment]:
        """Add a comment at the head of the post's comment list."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            author = await self._require_user(uow, identity)

            comment = Comment(
                user_id=author.id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            post.comments = subdocument_editor.append(post.comments, comment)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    async def delete_comment(
        self, post_id: str, comment_id: str, identity: Identity
    ) -> list[Comment]:
        """Delete a comment. Only the comment's author may, not the post owner."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            post.comments = subdocument_editor.remove_by_id(
                post.comments,
                comment_id,
                identity=identity,
                not_found_message="Comment does not exist",
                unauthorized_message="User not authorized",
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    @staticmethod
    def _caller_id(identity: Identity) -> UUID:
        user_id = parse_id(identity.id)
        if user_id is None:
            raise UserNotFoundError(identity.id)
        return user_id

    async def _require_post(self, uow: IUnitOfWork, post_id: str) -> Post:
        """Load a post; malformed ids are reported exactly like unknown ones."""
        parsed = parse_id(post_id)
        post = await uow.posts.get(parsed) if parsed else None
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def _require_user(self, uow: IUnitOfWork, identity: Identity) -> User:
        user = await uow.users.get(self._caller_id(identity))
        if not user:
            raise UserNotFoundError(identity.id)
        return user
