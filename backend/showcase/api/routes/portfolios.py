"""Portfolio Routes — browsing, CRUD, and view/like/rating mutations.

Invariants:
    - Browsing and view counting are public; everything else needs a session
    - Edit and delete require the author or an administrator
    - Edits change content fields only; views, likes, ratings move through
      the aggregation endpoints
    - The author of a new portfolio is always the session user
    - Every response carries computed average_rating and like_count
"""

from fastapi import APIRouter, Depends, Query, Response, status

from showcase.api.dependencies import optional_user, require_user
from showcase.core.domain_types import PortfolioCategory
from showcase.core.errors import (
    ErrorContext, NotAuthenticatedError, PermissionDeniedError, ResourceNotFoundError,
)
from showcase.core.portfolio_queries import (
    can_manage_portfolio, count_by_filter, filter_portfolios,
    portfolio_summary, portfolios_for_manager,
)
from showcase.schemas.portfolio import (
    Portfolio, PortfolioCreate, PortfolioEdit, PortfolioResponse, RatingRequest,
)
from showcase.schemas.user import SessionUser
from showcase.services.bootstrap import Showcase, get_showcase

router = APIRouter(prefix="/api/v1/portfolios", tags=["portfolios"])


def _get_or_404(showcase: Showcase, portfolio_id: str) -> Portfolio:
    portfolio = showcase.portfolios.get_by_id(portfolio_id)
    if portfolio is None:
        raise ResourceNotFoundError(
            "Portfolio", portfolio_id, ErrorContext(portfolio_id=portfolio_id),
        )
    return portfolio


def _require_manager(user: SessionUser, portfolio: Portfolio, action: str) -> None:
    if not can_manage_portfolio(user, portfolio):
        raise PermissionDeniedError(
            action, ErrorContext(user_id=user.id, portfolio_id=portfolio.id),
        )


@router.get("", response_model=list[PortfolioResponse])
def list_portfolios(
    category: PortfolioCategory | None = Query(None),
    mine: bool = Query(False),
    search: str = Query("", max_length=200),
    user: SessionUser | None = Depends(optional_user),
    showcase: Showcase = Depends(get_showcase),
):
    """Browse portfolios, newest first."""
    if mine and user is None:
        raise NotAuthenticatedError()
    selected = filter_portfolios(
        showcase.portfolios.list(),
        category=category,
        author_id=user.id if mine else None,
        search=search,
    )
    return [portfolio_summary(p) for p in selected]


@router.get("/counts")
def portfolio_counts(
    user: SessionUser | None = Depends(optional_user),
    showcase: Showcase = Depends(get_showcase),
):
    return count_by_filter(showcase.portfolios.list(), user)


@router.get("/manage", response_model=list[PortfolioResponse])
def manageable_portfolios(
    user: SessionUser = Depends(require_user),
    showcase: Showcase = Depends(get_showcase),
):
    """Rows of the management table: all for admins, own for contributors."""
    rows = portfolios_for_manager(showcase.portfolios.list(), user)
    return [portfolio_summary(p) for p in rows]


@router.post("", response_model=PortfolioResponse, status_code=status.HTTP_201_CREATED)
def create_portfolio(
    body: PortfolioCreate,
    user: SessionUser = Depends(require_user),
    showcase: Showcase = Depends(get_showcase),
):
    return portfolio_summary(showcase.portfolios.create(body, user.id))


@router.get("/{portfolio_id}", response_model=PortfolioResponse)
def get_portfolio(portfolio_id: str, showcase: Showcase = Depends(get_showcase)):
    return portfolio_summary(_get_or_404(showcase, portfolio_id))


@router.patch("/{portfolio_id}", response_model=PortfolioResponse)
def update_portfolio(
    portfolio_id: str,
    body: PortfolioEdit,
    user: SessionUser = Depends(require_user),
    showcase: Showcase = Depends(get_showcase),
):
    _require_manager(user, _get_or_404(showcase, portfolio_id), "edit this portfolio")
    return portfolio_summary(showcase.portfolios.update(portfolio_id, body.to_patch()))


@router.delete("/{portfolio_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_portfolio(
    portfolio_id: str,
    user: SessionUser = Depends(require_user),
    showcase: Showcase = Depends(get_showcase),
):
    _require_manager(user, _get_or_404(showcase, portfolio_id), "delete this portfolio")
    showcase.portfolios.delete(portfolio_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{portfolio_id}/views", response_model=PortfolioResponse)
def record_view(portfolio_id: str, showcase: Showcase = Depends(get_showcase)):
    return portfolio_summary(showcase.aggregation.increment_view(portfolio_id))


@router.post("/{portfolio_id}/likes", response_model=PortfolioResponse)
def toggle_like(
    portfolio_id: str,
    user: SessionUser = Depends(require_user),
    showcase: Showcase = Depends(get_showcase),
):
    return portfolio_summary(showcase.aggregation.toggle_like(portfolio_id, user.id))


@router.put("/{portfolio_id}/ratings", response_model=PortfolioResponse)
def rate_portfolio(
    portfolio_id: str,
    body: RatingRequest,
    user: SessionUser = Depends(require_user),
    showcase: Showcase = Depends(get_showcase),
):
    return portfolio_summary(
        showcase.aggregation.rate(portfolio_id, user.id, body.score),
    )
