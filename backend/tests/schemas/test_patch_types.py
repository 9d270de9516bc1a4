"""Patch Types — explicit optional fields and the blank-password rule.

Invariants:
    - UserPatch.changes() omits fields left as None
    - A blank or whitespace password never reaches the stored record
    - PortfolioPatch rejects duplicate likes and duplicate raters
    - Blank titles and display names are rejected on create and on patch
    - PortfolioEdit accepts content fields only
"""

import pytest
from pydantic import ValidationError

from showcase.core.domain_types import PortfolioCategory, UserRole
from showcase.schemas.portfolio import PortfolioCreate, PortfolioEdit, PortfolioPatch, Rating
from showcase.schemas.user import User, UserCreate, UserPatch


# --- UserPatch ----------------------------------------------------------------

def test_user_patch_changes_only_supplied_fields():
    assert UserPatch(display_name="New Name").changes() == {"display_name": "New Name"}


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_password_is_dropped_from_changes(blank):
    changes = UserPatch(password=blank, display_name="X").changes()
    assert "password" not in changes
    assert changes == {"display_name": "X"}


def test_non_blank_password_is_kept():
    assert UserPatch(password="s3cret").changes() == {"password": "s3cret"}


def test_user_patch_role_is_enum():
    assert UserPatch(role="admin").changes() == {"role": UserRole.ADMIN}


def test_user_create_strips_display_name_but_not_username():
    data = UserCreate(username=" Bob", password="pw", display_name="  Bob B  ")
    assert data.username == " Bob"
    assert data.display_name == "Bob B"


def test_user_create_rejects_empty_password():
    with pytest.raises(ValidationError):
        UserCreate(username="bob", password="", display_name="Bob")


def test_public_and_session_views_drop_password():
    user = User(id="u1", username="bob", password="pw", display_name="Bob")
    assert "password" not in user.to_public().model_dump()
    assert "password" not in user.to_session().model_dump()


# --- PortfolioPatch -----------------------------------------------------------

def test_portfolio_patch_changes_are_json_ready():
    patch = PortfolioPatch(category=PortfolioCategory.COMMANDER, views=4)
    assert patch.changes() == {"category": "commander", "views": 4}


def test_portfolio_patch_rejects_duplicate_likes():
    with pytest.raises(ValidationError):
        PortfolioPatch(likes=["u1", "u1"])


def test_portfolio_patch_rejects_duplicate_raters():
    with pytest.raises(ValidationError):
        PortfolioPatch(ratings=[Rating(user_id="u1", score=2), Rating(user_id="u1", score=3)])


def test_portfolio_patch_rejects_negative_views():
    with pytest.raises(ValidationError):
        PortfolioPatch(views=-1)


def test_portfolio_create_rejects_blank_title():
    with pytest.raises(ValidationError):
        PortfolioCreate(title="   ", category="commander", type="other")


@pytest.mark.parametrize("model", [PortfolioPatch, PortfolioEdit])
def test_portfolio_patches_reject_blank_title(model):
    with pytest.raises(ValidationError):
        model(title="   ")


def test_portfolio_patch_strips_title():
    assert PortfolioPatch(title="  Robots  ").changes() == {"title": "Robots"}


def test_user_patch_rejects_blank_display_name():
    with pytest.raises(ValidationError):
        UserPatch(display_name="  ")


def test_user_patch_strips_display_name():
    assert UserPatch(display_name=" Jane ").changes() == {"display_name": "Jane"}


# --- PortfolioEdit ------------------------------------------------------------

@pytest.mark.parametrize("counter", [
    {"views": 0}, {"likes": ["u1"]}, {"ratings": [{"user_id": "u1", "score": 5}]},
])
def test_portfolio_edit_forbids_counters(counter):
    with pytest.raises(ValidationError):
        PortfolioEdit(title="X", **counter)


def test_portfolio_edit_forbids_unknown_fields():
    with pytest.raises(ValidationError):
        PortfolioEdit(author_id="user-1")


def test_portfolio_edit_to_patch_carries_only_supplied_fields():
    patch = PortfolioEdit(description="New", category="commander").to_patch()
    assert patch.changes() == {"description": "New", "category": "commander"}
