"""Aggregation Rules — pure like-toggle, rating upsert, and average computation.

Invariants:
    - toggle_like flips exactly one membership: never duplicates, never removes a non-member
    - upsert_rating keeps at most one entry per user id and preserves sequence position
    - average_rating is recomputed from ratings on demand, never stored
    - Inputs are never mutated; new lists are returned

Design Decisions:
    - Pure functions over Portfolio methods: the engine in services/ owns IO,
      these own the rules (tested without a database)
    - bool is rejected as a score even though it subclasses int
"""

from showcase.core.domain_types import MAX_RATING_SCORE, MIN_RATING_SCORE
from showcase.core.errors import InvalidScoreError
from showcase.schemas.portfolio import Rating


def validate_score(score: object) -> int:
    """Return score if it is an int in [1, 5], else raise InvalidScoreError."""
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(score)
    if not MIN_RATING_SCORE <= score <= MAX_RATING_SCORE:
        raise InvalidScoreError(score)
    return score


def toggle_like(likes: list[str], user_id: str) -> list[str]:
    """Remove user_id if present, else append it."""
    if user_id in likes:
        return [uid for uid in likes if uid != user_id]
    return [*likes, user_id]


def upsert_rating(ratings: list[Rating], user_id: str, score: int) -> list[Rating]:
    """Overwrite the user's score in place, or append a new entry."""
    score = validate_score(score)
    updated = [r.model_copy() for r in ratings]
    for entry in updated:
        if entry.user_id == user_id:
            entry.score = score
            return updated
    updated.append(Rating(user_id=user_id, score=score))
    return updated


def average_rating(ratings: list[Rating]) -> float:
    """sum(scores) / count(scores); 0.0 when nobody has rated."""
    if not ratings:
        return 0.0
    return sum(r.score for r in ratings) / len(ratings)
