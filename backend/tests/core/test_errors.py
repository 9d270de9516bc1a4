"""Error Hierarchy — codes, statuses, and the REST envelope."""

import pytest

from showcase.core.errors import (
    AuthorNotFoundError, DatabaseError, DuplicateUsernameError, ErrorContext,
    InvalidCredentialsError, InvalidScoreError, LastAdministratorError,
    NotAuthenticatedError, PermissionDeniedError, ResourceNotFoundError, ShowcaseError,
    ViewCountDecreaseError,
)


@pytest.mark.parametrize(
    "error, code, status",
    [
        (DuplicateUsernameError("bob"), "DUPLICATE_USERNAME", 409),
        (ResourceNotFoundError("User", "x"), "RESOURCE_NOT_FOUND", 404),
        (LastAdministratorError("u1"), "LAST_ADMINISTRATOR", 409),
        (InvalidCredentialsError(), "INVALID_CREDENTIALS", 401),
        (AuthorNotFoundError("ghost"), "AUTHOR_NOT_FOUND", 400),
        (InvalidScoreError(7), "INVALID_SCORE", 400),
        (ViewCountDecreaseError("p1", 5, 2), "VIEW_COUNT_DECREASE", 409),
        (NotAuthenticatedError(), "NOT_AUTHENTICATED", 401),
        (PermissionDeniedError("edit"), "PERMISSION_DENIED", 403),
        (DatabaseError("boom", "commit"), "DATABASE_ERROR", 503),
    ],
)
def test_every_error_has_code_and_status(error, code, status):
    assert isinstance(error, ShowcaseError)
    assert error.code == code
    assert error.http_status == status


def test_to_response_envelope_shape():
    err = ResourceNotFoundError(
        "Portfolio", "p1", ErrorContext(portfolio_id="p1"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Portfolio 'p1' not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["portfolio_id"] == "p1"


def test_invalid_credentials_message_does_not_reveal_which_part_failed():
    assert InvalidCredentialsError().message == "Invalid username or password"


def test_author_not_found_records_user_in_context():
    assert AuthorNotFoundError("ghost").context.user_id == "ghost"


def test_view_count_decrease_records_portfolio_in_context():
    assert ViewCountDecreaseError("p1", 5, 2).context.portfolio_id == "p1"
