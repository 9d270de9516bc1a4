"""PortfolioAggregationEngine — view counter, like toggle, and rating upsert.

Invariants:
    - increment_view adds exactly one per call
    - toggle_like flips exactly one membership per call (involution in pairs)
    - rate keeps one entry per user, overwriting in place
    - Unknown portfolio id raises ResourceNotFoundError for all three (never a silent no-op)
    - Each read-modify-write runs inside the portfolio store's critical section

Design Decisions:
    - Layered on PortfolioStore.update with explicit PortfolioPatch values;
      the rules themselves live in core/aggregation.py
    - Score validated before the lock is taken so a bad score never touches the store
"""

import logging

from showcase.core.aggregation import (
    average_rating, toggle_like, upsert_rating, validate_score,
)
from showcase.core.domain_types import PortfolioId, UserId
from showcase.core.errors import ErrorContext, ResourceNotFoundError
from showcase.schemas.portfolio import Portfolio, PortfolioPatch
from showcase.services.portfolio_store import PortfolioStore

logger = logging.getLogger(__name__)


class PortfolioAggregationEngine:
    """Derived-state mutations on top of PortfolioStore."""

    def __init__(self, portfolios: PortfolioStore):
        self._portfolios = portfolios

    def increment_view(self, portfolio_id: PortfolioId) -> Portfolio:
        with self._portfolios.locked():
            current = self._require(portfolio_id)
            return self._portfolios.update(
                portfolio_id, PortfolioPatch(views=current.views + 1),
            )

    def toggle_like(self, portfolio_id: PortfolioId, user_id: UserId) -> Portfolio:
        with self._portfolios.locked():
            current = self._require(portfolio_id)
            likes = toggle_like(current.likes, user_id)
            updated = self._portfolios.update(portfolio_id, PortfolioPatch(likes=likes))
        logger.info(
            "Like added" if user_id in likes else "Like removed",
            extra={"portfolio_id": portfolio_id, "user_id": user_id},
        )
        return updated

    def rate(self, portfolio_id: PortfolioId, user_id: UserId, score: int) -> Portfolio:
        score = validate_score(score)
        with self._portfolios.locked():
            current = self._require(portfolio_id)
            ratings = upsert_rating(current.ratings, user_id, score)
            return self._portfolios.update(
                portfolio_id, PortfolioPatch(ratings=ratings),
            )

    def average_rating(self, portfolio_id: PortfolioId) -> float:
        return average_rating(self._require(portfolio_id).ratings)

    def _require(self, portfolio_id: str) -> Portfolio:
        portfolio = self._portfolios.get_by_id(portfolio_id)
        if portfolio is None:
            raise ResourceNotFoundError(
                "Portfolio", portfolio_id, ErrorContext(portfolio_id=portfolio_id),
            )
        return portfolio
