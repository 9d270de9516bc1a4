"""Boundary Protocols — contracts between core rules and the persistence shell.

Invariants:
    - Stores NEVER import a concrete persistence class — only these Protocols
    - DocumentPersistence is the only thing that touches the storage medium
    - load_all on a never-written key returns [] (not an error)
    - save_all replaces the whole collection; readers never observe a partial write

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Sync, not async: every store operation runs to completion before the next;
      the HTTP shell runs them in worker threads and serializes them with lock()
"""

from contextlib import AbstractContextManager
from typing import Protocol

from showcase.core.domain_types import UserId


class DocumentPersistence(Protocol):
    """Contract for whole-collection document storage — implemented by shell."""
    def load_all(self, store_key: str) -> list[dict]: ...
    def save_all(self, store_key: str, documents: list[dict]) -> None: ...
    def exists(self, store_key: str) -> bool: ...
    def delete(self, store_key: str) -> None: ...
    def lock(self, store_key: str) -> AbstractContextManager: ...


class UserLike(Protocol):
    """Structural contract for anything carrying identity and role.

    Satisfied by both the full User record and the session snapshot, so
    permission helpers accept either.
    """
    id: str
    display_name: str
    role: str


class UserDirectory(Protocol):
    """Read-only user lookup used by PortfolioStore to resolve authors."""
    def get_by_id(self, user_id: UserId) -> UserLike | None: ...
