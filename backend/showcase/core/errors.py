"""Error Hierarchy — typed, categorized exceptions for all showcase failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ShowcaseError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Corrupt persisted documents are NOT an error here; persistence fails soft to []
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    portfolio_id: str | None = None
    store_key: str | None = None
    debug_info: dict[str, Any] | None = None


class ShowcaseError(Exception):
    """Base exception for all showcase errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "portfolio_id": self.context.portfolio_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class DuplicateUsernameError(ShowcaseError):
    """Username already belongs to another user."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            f"Username '{username}' already exists",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.username = username


class ResourceNotFoundError(ShowcaseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class LastAdministratorError(ShowcaseError):
    """Operation would leave the system without an administrator."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "Cannot remove the last administrator",
            "LAST_ADMINISTRATOR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )


class InvalidCredentialsError(ShowcaseError):
    """Username unknown or secret mismatch. Never says which."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorNotFoundError(ShowcaseError):
    """Portfolio author id does not resolve to a user."""
    def __init__(self, author_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = author_id
        super().__init__(
            f"Author '{author_id}' not found",
            "AUTHOR_NOT_FOUND", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.author_id = author_id


class InvalidScoreError(ShowcaseError):
    """Rating score is not an integer in [1, 5]."""
    def __init__(self, score: object, context: ErrorContext | None = None):
        super().__init__(
            f"Rating score must be an integer between 1 and 5, got {score!r}",
            "INVALID_SCORE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.score = score


class ViewCountDecreaseError(ShowcaseError):
    """Patch would move a view counter backwards."""
    def __init__(
        self, portfolio_id: str, current: int, requested: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.portfolio_id = portfolio_id
        super().__init__(
            f"View count cannot decrease ({current} -> {requested})",
            "VIEW_COUNT_DECREASE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.current = current
        self.requested = requested


class NotAuthenticatedError(ShowcaseError):
    """No active session."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Login required",
            "NOT_AUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(ShowcaseError):
    """Session user lacks the role or ownership for the operation."""
    def __init__(self, action: str, context: ErrorContext | None = None):
        super().__init__(
            f"Not allowed to {action}",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.action = action


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ShowcaseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
