"""Portfolio Queries — pure filtering, counting, permission checks, and response shaping.

Invariants:
    - Stores keep insertion order; recency ordering happens only here
    - Search is a case-insensitive substring match on title
    - Admins manage every portfolio; contributors only their own
    - Anonymous callers (user is None) own nothing

Design Decisions:
    - Presentation-side helpers kept pure so routes stay thin and the stores
      never grow query methods
"""

from showcase.core.aggregation import average_rating
from showcase.core.domain_types import PortfolioCategory, UserRole
from showcase.core.repository_protocols import UserLike
from showcase.schemas.portfolio import Portfolio, PortfolioResponse

FILTER_ALL = "all"
FILTER_MINE = "my_portfolios"


def filter_portfolios(
    portfolios: list[Portfolio],
    category: PortfolioCategory | None = None,
    author_id: str | None = None,
    search: str = "",
) -> list[Portfolio]:
    """Apply category/author/title filters, newest first."""
    needle = search.strip().lower()
    selected = [
        p for p in portfolios
        if (category is None or p.category == category)
        and (author_id is None or p.author_id == author_id)
        and needle in p.title.lower()
    ]
    return sorted(selected, key=lambda p: p.created_at, reverse=True)


def count_by_filter(
    portfolios: list[Portfolio], user: UserLike | None,
) -> dict[str, int]:
    """Counts shown next to each filter tab."""
    counts = {FILTER_ALL: len(portfolios)}
    for category in PortfolioCategory:
        counts[category.value] = sum(1 for p in portfolios if p.category == category)
    counts[FILTER_MINE] = (
        sum(1 for p in portfolios if p.author_id == user.id) if user else 0
    )
    return counts


def is_admin(user: UserLike | None) -> bool:
    return user is not None and user.role == UserRole.ADMIN


def can_manage_portfolio(user: UserLike | None, portfolio: Portfolio) -> bool:
    """Author or administrator may edit and delete."""
    if user is None:
        return False
    return is_admin(user) or portfolio.author_id == user.id


def portfolios_for_manager(
    portfolios: list[Portfolio], user: UserLike | None,
) -> list[Portfolio]:
    """Management table rows: all for admins, own for contributors."""
    if user is None:
        return []
    if is_admin(user):
        return list(portfolios)
    return [p for p in portfolios if p.author_id == user.id]


def portfolio_summary(portfolio: Portfolio) -> PortfolioResponse:
    """Public view with the derived counters."""
    return PortfolioResponse(
        **portfolio.model_dump(),
        average_rating=average_rating(portfolio.ratings),
        like_count=len(portfolio.likes),
        rating_count=len(portfolio.ratings),
    )
