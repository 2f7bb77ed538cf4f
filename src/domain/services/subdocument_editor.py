"""Edits on ordered lists of embedded sub-entities.

Likes, comments, experience and education entries all live as ordered
lists inside their parent document, newest first. Every function here
returns a new list and leaves its input untouched, so a rejected edit
never leaves a half-modified list behind.

Entries are always located by id or by author, never by a previously
computed index: two requests editing the same document may interleave,
and an index taken before the other write lands can point at the wrong
entry.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar
from uuid import UUID

from core.exceptions import (
    DuplicateActionError,
    NoSuchActionError,
    NotFoundError,
    UnauthorizedError,
)
from domain.entities.identity import Identity
from domain.policies.ownership import Decision, authorize


class SubEntity(Protocol):
    @property
    def id(self) -> UUID: ...


class AuthoredSubEntity(SubEntity, Protocol):
    @property
    def owner_id(self) -> UUID: ...


T = TypeVar("T", bound=SubEntity)
A = TypeVar("A", bound=AuthoredSubEntity)


def _is_author(entry: AuthoredSubEntity, identity: Identity) -> bool:
    return authorize(identity, entry) is Decision.ALLOW


def add_toggle(
    entries: Sequence[A],
    identity: Identity,
    factory: Callable[[Identity], A],
    message: str = "Action already performed",
) -> list[A]:
    """Prepend an entry for ``identity`` unless it already has one."""
    if any(_is_author(entry, identity) for entry in entries):
        raise DuplicateActionError(message)
    return [factory(identity), *entries]


def remove_toggle(
    entries: Sequence[A],
    identity: Identity,
    message: str = "Action has not been performed yet",
) -> list[A]:
    """Remove the single entry authored by ``identity``."""
    for position, entry in enumerate(entries):
        if _is_author(entry, identity):
            return [*entries[:position], *entries[position + 1 :]]
    raise NoSuchActionError(message)


def append(entries: Sequence[T], entry: T) -> list[T]:
    """Insert ``entry`` at the head of the list."""
    return [entry, *entries]


def remove_by_id(
    entries: Sequence[T],
    target_id: str,
    identity: Identity | None = None,
    not_found_message: str = "Entry does not exist",
    unauthorized_message: str = "User not authorized",
) -> list[T]:
    """Remove the entry whose id is ``target_id``.

    When ``identity`` is given the entry must also have been authored by it.
    Ids that cannot address any entry are reported as not found.
    """
    target = next((entry for entry in entries if str(entry.id) == target_id), None)
    if target is None:
        raise NotFoundError(not_found_message, details={"id": target_id})

    if identity is not None and not _is_author(target, identity):  # type: ignore[arg-type]
        raise UnauthorizedError(unauthorized_message)

    return [entry for entry in entries if entry.id != target.id]
