"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, PortfolioId wrap opaque strings — never parsed, never assumed sortable
    - RatingScore is bounded 1–5 (enforced in core/aggregation.py)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON documents without custom encoders
"""

import random
import string
import time
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
PortfolioId = NewType("PortfolioId", str)


# ─── Value Types ─────────────────────────────────────────────────

RatingScore = NewType("RatingScore", int)   # 1–5

MIN_RATING_SCORE = 1
MAX_RATING_SCORE = 5


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """User roles. At least one ADMIN must exist at all times."""
    ADMIN = "admin"
    CONTRIBUTOR = "contributor"


class PortfolioCategory(str, Enum):
    """The two fixed showcase categories."""
    COMMANDER = "commander"
    PERSONNEL = "personnel"


class PortfolioType(str, Enum):
    """The two fixed portfolio types."""
    APPLICATION = "application"
    OTHER = "other"


class StoreKey(str, Enum):
    """Stable keys of the persisted documents."""
    USERS = "portfolio_users"
    PORTFOLIOS = "portfolio_portfolios"
    CURRENT_USER = "portfolio_current_user"


# ─── Identity generation ─────────────────────────────────────────

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Timestamp plus random base36 suffix. Unique, not sortable."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"id-{millis}-{suffix}"
