"""PortfolioStore — creation defaults, author resolution, shallow updates, deletion."""

import pytest

from showcase.core.domain_types import PortfolioCategory
from showcase.core.errors import (
    AuthorNotFoundError, ResourceNotFoundError, ViewCountDecreaseError,
)
from showcase.schemas.portfolio import PortfolioPatch, Rating
from showcase.schemas.user import UserPatch
from showcase.services.portfolio_store import PortfolioStore


def test_create_synthesizes_derived_fields(portfolio_store, contributor, portfolio_data, clock):
    created = portfolio_store.create(portfolio_data, contributor.id)
    assert created.id.startswith("id-")
    assert created.author_id == contributor.id
    assert created.author_name == "Jane Doe"
    assert created.views == 0
    assert created.likes == []
    assert created.ratings == []
    assert created.created_at == clock.now
    assert created.title == "Library System"
    assert created.album_images == portfolio_data.album_images


def test_create_persists(portfolio, persistence, user_store):
    reloaded = PortfolioStore(persistence, user_store).get_by_id(portfolio.id)
    assert reloaded == portfolio


def test_create_with_unknown_author_fails_and_store_unchanged(
    portfolio_store, portfolio, portfolio_data, persistence,
):
    before = persistence.load_all("portfolio_portfolios")
    with pytest.raises(AuthorNotFoundError):
        portfolio_store.create(portfolio_data, "ghost")
    assert persistence.load_all("portfolio_portfolios") == before
    assert [p.id for p in portfolio_store.list()] == [portfolio.id]


def test_list_keeps_insertion_order(portfolio_store, contributor, portfolio_data, clock):
    first = portfolio_store.create(portfolio_data, contributor.id)
    clock.advance(days=-3)
    second = portfolio_store.create(portfolio_data, contributor.id)
    assert [p.id for p in portfolio_store.list()] == [first.id, second.id]


def test_author_name_is_frozen_at_creation(portfolio, portfolio_store, user_store, contributor):
    user_store.update(contributor.id, UserPatch(display_name="Jane Smith"))
    assert portfolio_store.get_by_id(portfolio.id).author_name == "Jane Doe"


def test_update_replaces_fields_shallowly(portfolio_store, portfolio):
    updated = portfolio_store.update(portfolio.id, PortfolioPatch(
        title="Library System v2",
        category=PortfolioCategory.COMMANDER,
        album_images=["data:image/png;base64,ZZZZ"],
    ))
    assert updated.title == "Library System v2"
    assert updated.category == PortfolioCategory.COMMANDER
    assert updated.album_images == ["data:image/png;base64,ZZZZ"]
    assert updated.description == portfolio.description
    assert updated.created_at == portfolio.created_at
    assert updated.author_name == portfolio.author_name


def test_update_with_empty_collection_clears_it(portfolio_store, portfolio):
    assert portfolio_store.update(portfolio.id, PortfolioPatch(album_images=[])).album_images == []


def test_update_persists(portfolio_store, portfolio, persistence, user_store):
    portfolio_store.update(portfolio.id, PortfolioPatch(ratings=[Rating(user_id="x", score=3)]))
    reloaded = PortfolioStore(persistence, user_store).get_by_id(portfolio.id)
    assert reloaded.ratings == [Rating(user_id="x", score=3)]


def test_update_unknown_portfolio_fails(portfolio_store):
    with pytest.raises(ResourceNotFoundError):
        portfolio_store.update("ghost", PortfolioPatch(title="X"))


def test_delete_removes_and_persists(portfolio_store, portfolio, persistence, user_store):
    portfolio_store.delete(portfolio.id)
    assert portfolio_store.get_by_id(portfolio.id) is None
    assert PortfolioStore(persistence, user_store).list() == []


def test_delete_unknown_portfolio_fails(portfolio_store):
    with pytest.raises(ResourceNotFoundError):
        portfolio_store.delete("ghost")


def test_returned_records_are_copies(portfolio_store, portfolio):
    portfolio_store.get_by_id(portfolio.id).likes.append("intruder")
    assert portfolio_store.get_by_id(portfolio.id).likes == []


def test_undecodable_records_are_skipped_on_load(persistence, user_store, portfolio):
    documents = persistence.load_all("portfolio_portfolios")
    documents.append({"id": "broken", "likes": ["a", "a"]})
    persistence.save_all("portfolio_portfolios", documents)
    assert [p.id for p in PortfolioStore(persistence, user_store).list()] == [portfolio.id]


def test_update_rejects_lower_view_count(portfolio_store, portfolio, persistence):
    portfolio_store.update(portfolio.id, PortfolioPatch(views=10))
    before = persistence.load_all("portfolio_portfolios")
    with pytest.raises(ViewCountDecreaseError) as exc_info:
        portfolio_store.update(portfolio.id, PortfolioPatch(views=3, title="Rewound"))
    assert (exc_info.value.current, exc_info.value.requested) == (10, 3)
    assert persistence.load_all("portfolio_portfolios") == before
    stored = portfolio_store.get_by_id(portfolio.id)
    assert (stored.views, stored.title) == (10, portfolio.title)


def test_update_accepts_same_view_count(portfolio_store, portfolio):
    assert portfolio_store.update(portfolio.id, PortfolioPatch(views=0)).views == 0
