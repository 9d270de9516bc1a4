"""PortfolioStore — owns the portfolios document: creation, shallow updates, deletion.

Invariants:
    - author_id resolves to an existing user at creation; otherwise nothing is persisted
    - author_name is copied from the author at creation and never re-joined
    - New portfolios start with views=0, likes=[], ratings=[], created_at=now (UTC)
    - update() replaces fields shallowly; id/author/created_at are not patchable
    - views never decreases through update()
    - The in-memory collection is replaced only after save_all succeeds

Design Decisions:
    - locked() exposes the store's critical section so derived mutations
      (services/aggregation_engine.py) can read and update atomically
    - Clock is injectable for deterministic tests
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from typing import Callable

from pydantic import ValidationError

from showcase.core.domain_types import PortfolioId, StoreKey, UserId, generate_id
from showcase.core.errors import (
    AuthorNotFoundError, ErrorContext, ResourceNotFoundError, ViewCountDecreaseError,
)
from showcase.core.repository_protocols import DocumentPersistence, UserDirectory
from showcase.schemas.portfolio import Portfolio, PortfolioCreate, PortfolioPatch

logger = logging.getLogger(__name__)

_KEY = StoreKey.PORTFOLIOS.value


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PortfolioStore:
    """Persistent collection of Portfolio records."""

    def __init__(
        self,
        persistence: DocumentPersistence,
        users: UserDirectory,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._persistence = persistence
        self._users = users
        self._clock = clock
        self._portfolios: list[Portfolio] = self._load()

    def locked(self) -> AbstractContextManager:
        """Re-entrant critical section over the portfolios document."""
        return self._persistence.lock(_KEY)

    def list(self) -> list[Portfolio]:
        """Full snapshot, insertion order."""
        return [p.model_copy(deep=True) for p in self._portfolios]

    def get_by_id(self, portfolio_id: PortfolioId) -> Portfolio | None:
        for portfolio in self._portfolios:
            if portfolio.id == portfolio_id:
                return portfolio.model_copy(deep=True)
        return None

    def create(self, data: PortfolioCreate, author_id: UserId) -> Portfolio:
        with self.locked():
            author = self._users.get_by_id(author_id)
            if author is None:
                raise AuthorNotFoundError(author_id)
            portfolio = Portfolio(
                id=generate_id(),
                author_id=author_id,
                author_name=author.display_name,
                views=0,
                likes=[],
                ratings=[],
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._flush([*self._portfolios, portfolio])
        logger.info(
            f"Portfolio created: {portfolio.title}",
            extra={"portfolio_id": portfolio.id, "user_id": author_id},
        )
        return portfolio.model_copy(deep=True)

    def update(self, portfolio_id: PortfolioId, patch: PortfolioPatch) -> Portfolio:
        with self.locked():
            index = self._index_of(portfolio_id)
            current = self._portfolios[index]
            changes = patch.changes()
            if changes.get("views", current.views) < current.views:
                raise ViewCountDecreaseError(portfolio_id, current.views, changes["views"])
            updated = Portfolio.model_validate(
                {**current.model_dump(mode="json"), **changes},
            )
            portfolios = list(self._portfolios)
            portfolios[index] = updated
            self._flush(portfolios)
        logger.info(
            f"Portfolio updated: fields={sorted(changes)}",
            extra={"portfolio_id": portfolio_id},
        )
        return updated.model_copy(deep=True)

    def delete(self, portfolio_id: PortfolioId) -> None:
        with self.locked():
            self._index_of(portfolio_id)
            self._flush([p for p in self._portfolios if p.id != portfolio_id])
        logger.info("Portfolio deleted", extra={"portfolio_id": portfolio_id})

    # ─── internals ──────────────────────────────────────────────

    def _index_of(self, portfolio_id: str) -> int:
        for index, portfolio in enumerate(self._portfolios):
            if portfolio.id == portfolio_id:
                return index
        raise ResourceNotFoundError(
            "Portfolio", portfolio_id, ErrorContext(portfolio_id=portfolio_id),
        )

    def _flush(self, portfolios: list[Portfolio]) -> None:
        self._persistence.save_all(
            _KEY, [p.model_dump(mode="json") for p in portfolios],
        )
        self._portfolios = portfolios

    def _load(self) -> list[Portfolio]:
        portfolios = []
        for document in self._persistence.load_all(_KEY):
            try:
                portfolios.append(Portfolio.model_validate(document))
            except ValidationError as e:
                logger.warning(
                    f"Skipping undecodable portfolio document: {e.error_count()} error(s)",
                    extra={"store_key": _KEY},
                )
        return portfolios
