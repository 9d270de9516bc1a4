"""Portfolio Schemas — persisted record, rating entry, create/patch payloads, response view.

Invariants:
    - Portfolio.likes has no duplicate user ids
    - Portfolio.ratings has at most one entry per user id, each score in [1, 5]
    - views is never negative
    - id, author_id, author_name, created_at are not patchable
    - PortfolioEdit (HTTP edits) carries content fields only; extra keys are rejected

Design Decisions:
    - Image payloads are opaque strings (already encoded by the collaborator)
    - PortfolioPatch replaces collections wholesale (shallow merge), never deep-merges
    - average_rating lives only on PortfolioResponse; it is computed, never stored
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from showcase.core.domain_types import PortfolioCategory, PortfolioType


def _strip_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class Rating(BaseModel):
    """One user's star rating."""
    user_id: str
    score: int = Field(ge=1, le=5)


class Portfolio(BaseModel):
    """Persisted portfolio record."""
    id: str
    author_id: str
    author_name: str
    title: str
    description: str = ""
    category: PortfolioCategory
    type: PortfolioType
    cover_image: str = ""
    album_images: list[str] = Field(default_factory=list)
    views: int = Field(0, ge=0)
    likes: list[str] = Field(default_factory=list)
    ratings: list[Rating] = Field(default_factory=list)
    created_at: datetime

    @model_validator(mode="after")
    def validate_membership(self):
        if len(set(self.likes)) != len(self.likes):
            raise ValueError("likes must not contain duplicate user ids")
        raters = [r.user_id for r in self.ratings]
        if len(set(raters)) != len(raters):
            raise ValueError("ratings must hold at most one entry per user id")
        return self


class PortfolioCreate(BaseModel):
    """Payload for PortfolioStore.create. Author is passed separately."""
    title: str = Field(min_length=1, max_length=300)
    description: str = Field("", max_length=10_000)
    category: PortfolioCategory
    type: PortfolioType
    cover_image: str = ""
    album_images: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class PortfolioPatch(BaseModel):
    """Partial update for PortfolioStore.update. Every optional field is listed.

    views/likes/ratings are written only by the aggregation engine; HTTP edits
    arrive as PortfolioEdit.
    """
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = Field(None, max_length=10_000)
    category: PortfolioCategory | None = None
    type: PortfolioType | None = None
    cover_image: str | None = None
    album_images: list[str] | None = None
    views: int | None = Field(None, ge=0)
    likes: list[str] | None = None
    ratings: list[Rating] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return None if v is None else _strip_title(v)

    @model_validator(mode="after")
    def validate_membership(self):
        if self.likes is not None and len(set(self.likes)) != len(self.likes):
            raise ValueError("likes must not contain duplicate user ids")
        if self.ratings is not None:
            raters = [r.user_id for r in self.ratings]
            if len(set(raters)) != len(raters):
                raise ValueError("ratings must hold at most one entry per user id")
        return self

    def changes(self) -> dict:
        """Fields to replace on the stored record (None means unchanged)."""
        return self.model_dump(mode="json", exclude_none=True)


class PortfolioEdit(BaseModel):
    """Author/admin edit body. Counters are not accepted here."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = Field(None, max_length=10_000)
    category: PortfolioCategory | None = None
    type: PortfolioType | None = None
    cover_image: str | None = None
    album_images: list[str] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return None if v is None else _strip_title(v)

    def to_patch(self) -> PortfolioPatch:
        return PortfolioPatch(**self.model_dump(exclude_none=True))


class RatingRequest(BaseModel):
    """Rate body. Range is checked by the aggregation engine (InvalidScoreError)."""
    score: int


class PortfolioResponse(BaseModel):
    """Public portfolio view with derived counters."""
    id: str
    author_id: str
    author_name: str
    title: str
    description: str
    category: PortfolioCategory
    type: PortfolioType
    cover_image: str
    album_images: list[str]
    views: int
    likes: list[str]
    ratings: list[Rating]
    created_at: datetime
    average_rating: float
    like_count: int
    rating_count: int
