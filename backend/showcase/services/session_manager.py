"""SessionManager — the single "currently authenticated user" snapshot.

Invariants:
    - The snapshot never carries the credential secret
    - The snapshot is not re-synchronized with later User edits (identity at login time)
    - logout() never raises, even when nobody is logged in
    - Only reads UserStore; never mutates it

Design Decisions:
    - Persisted as a one-element document under its own key so a restart keeps
      the session, the way the browser kept it per origin
    - No expiry: a session lasts until the next login or logout
"""

import hmac
import logging

from pydantic import ValidationError

from showcase.core.domain_types import StoreKey
from showcase.core.errors import InvalidCredentialsError
from showcase.core.repository_protocols import DocumentPersistence
from showcase.schemas.user import SessionUser
from showcase.services.user_store import UserStore

logger = logging.getLogger(__name__)

_KEY = StoreKey.CURRENT_USER.value


class SessionManager:
    """Login/logout over UserStore with a persisted snapshot."""

    def __init__(self, persistence: DocumentPersistence, users: UserStore):
        self._persistence = persistence
        self._users = users
        self._current = self._load()

    def login(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username(username)
        if user is None or not _secret_matches(user.password, password):
            logger.warning("Login rejected")
            raise InvalidCredentialsError()
        snapshot = user.to_session()
        with self._persistence.lock(_KEY):
            self._persistence.save_all(_KEY, [snapshot.model_dump(mode="json")])
            self._current = snapshot
        logger.info(f"Login: {snapshot.username}", extra={"user_id": snapshot.id})
        return snapshot.model_copy()

    def logout(self) -> None:
        with self._persistence.lock(_KEY):
            self._persistence.delete(_KEY)
            previous, self._current = self._current, None
        if previous is not None:
            logger.info("Logout", extra={"user_id": previous.id})

    def current(self) -> SessionUser | None:
        return self._current.model_copy() if self._current else None

    def _load(self) -> SessionUser | None:
        documents = self._persistence.load_all(_KEY)
        if not documents:
            return None
        try:
            return SessionUser.model_validate(documents[0])
        except ValidationError:
            logger.warning(
                "Discarding undecodable session snapshot", extra={"store_key": _KEY},
            )
            return None


def _secret_matches(stored: str | None, supplied: str) -> bool:
    """Plaintext comparison; a user without a stored secret cannot log in."""
    if not stored:
        return False
    return hmac.compare_digest(stored.encode(), supplied.encode())
