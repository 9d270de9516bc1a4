"""UserStore — owns the users document: uniqueness, last-admin rule, partial updates.

Invariants:
    - No two users ever share a username (exact, case-sensitive)
    - At least one administrator exists after every successful mutation
    - The in-memory collection is replaced only after save_all succeeds
    - Returned records are copies; callers cannot mutate the cached collection

Design Decisions:
    - Loaded once at construction, flushed on every mutation (explicit store object,
      no ambient global storage)
    - Undecodable records are skipped with a warning rather than failing the whole store
    - Demoting the last admin via update() is rejected like deleting it
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from showcase.core.domain_types import StoreKey, UserId, UserRole, generate_id
from showcase.core.errors import (
    DuplicateUsernameError, ErrorContext, LastAdministratorError, ResourceNotFoundError,
)
from showcase.core.repository_protocols import DocumentPersistence
from showcase.schemas.user import User, UserCreate, UserPatch

logger = logging.getLogger(__name__)

_KEY = StoreKey.USERS.value


class UserStore:
    """Persistent collection of User records."""

    def __init__(self, persistence: DocumentPersistence):
        self._persistence = persistence
        self._users: list[User] = self._load()

    def list(self) -> list[User]:
        """Full snapshot, insertion order."""
        return [u.model_copy(deep=True) for u in self._users]

    def get_by_id(self, user_id: UserId) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user.model_copy(deep=True)
        return None

    def get_by_username(self, username: str) -> User | None:
        for user in self._users:
            if user.username == username:
                return user.model_copy(deep=True)
        return None

    def create(self, data: UserCreate) -> User:
        with self._persistence.lock(_KEY):
            if any(u.username == data.username for u in self._users):
                raise DuplicateUsernameError(data.username)
            user = User(id=generate_id(), **data.model_dump())
            self._flush([*self._users, user])
        logger.info(f"User created: {user.username}", extra={"user_id": user.id})
        return user.model_copy(deep=True)

    def update(self, user_id: UserId, patch: UserPatch) -> User:
        with self._persistence.lock(_KEY):
            index = self._index_of(user_id)
            current = self._users[index]
            changes = patch.changes()
            new_username = changes.get("username")
            if new_username is not None and any(
                u.username == new_username and u.id != user_id for u in self._users
            ):
                raise DuplicateUsernameError(new_username)
            if (
                current.is_admin
                and changes.get("role", UserRole.ADMIN) != UserRole.ADMIN
                and _admin_count(self._users) <= 1
            ):
                raise LastAdministratorError(user_id)
            updated = User.model_validate({**current.model_dump(), **changes})
            users = list(self._users)
            users[index] = updated
            self._flush(users)
        logger.info(
            f"User updated: fields={sorted(changes)}", extra={"user_id": user_id},
        )
        return updated.model_copy(deep=True)

    def delete(self, user_id: UserId) -> None:
        with self._persistence.lock(_KEY):
            index = self._index_of(user_id)
            if self._users[index].is_admin and _admin_count(self._users) <= 1:
                raise LastAdministratorError(user_id)
            self._flush([u for u in self._users if u.id != user_id])
        logger.info("User deleted", extra={"user_id": user_id})

    # ─── internals ──────────────────────────────────────────────

    def _index_of(self, user_id: str) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))

    def _flush(self, users: list[User]) -> None:
        self._persistence.save_all(_KEY, [u.model_dump(mode="json") for u in users])
        self._users = users

    def _load(self) -> list[User]:
        users = []
        for document in self._persistence.load_all(_KEY):
            try:
                users.append(User.model_validate(document))
            except ValidationError as e:
                logger.warning(
                    f"Skipping undecodable user document: {e.error_count()} error(s)",
                    extra={"store_key": _KEY},
                )
        return users


def _admin_count(users: list[User]) -> int:
    return sum(1 for u in users if u.is_admin)
