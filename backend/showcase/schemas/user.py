"""User Schemas — persisted record, session snapshot, and explicit patch types.

Invariants:
    - User.password is optional on read paths; UserPublic/SessionUser never carry it
    - UserPatch lists every field update() accepts; None means "leave unchanged"
    - A blank password in a UserPatch never overwrites the stored secret

Design Decisions:
    - One model per boundary (record, create, patch, public) over a single dict
    - Usernames are not stripped: uniqueness is exact and case-sensitive
"""

from pydantic import BaseModel, Field, field_validator

from showcase.core.domain_types import UserRole


class User(BaseModel):
    """Persisted user record."""
    id: str
    username: str
    password: str | None = None
    display_name: str
    role: UserRole = UserRole.CONTRIBUTOR

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def to_public(self) -> "UserPublic":
        return UserPublic(
            id=self.id, username=self.username,
            display_name=self.display_name, role=self.role,
        )

    def to_session(self) -> "SessionUser":
        return SessionUser(
            id=self.id, username=self.username,
            display_name=self.display_name, role=self.role,
        )


class UserPublic(BaseModel):
    """User without the credential secret; safe to return to collaborators."""
    id: str
    username: str
    display_name: str
    role: UserRole


class SessionUser(UserPublic):
    """Credential-stripped snapshot taken at login. Not re-synced with later edits."""

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class UserCreate(BaseModel):
    """Payload for UserStore.create."""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)
    display_name: str = Field(min_length=1, max_length=200)
    role: UserRole = UserRole.CONTRIBUTOR

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("display_name cannot be empty or whitespace")
        return v


class UserPatch(BaseModel):
    """Partial update for UserStore.update. Every optional field is listed."""
    username: str | None = Field(None, min_length=1, max_length=100)
    password: str | None = Field(None, max_length=200)
    display_name: str | None = Field(None, min_length=1, max_length=200)
    role: UserRole | None = None

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("display_name cannot be empty or whitespace")
        return v

    def changes(self) -> dict:
        """Fields to merge into the stored record.

        BLANK_PASSWORD_KEEPS_SECRET: an empty or whitespace-only password is
        dropped, so the stored secret is left as it was.
        """
        fields = self.model_dump(exclude_none=True)
        if not (self.password or "").strip():
            fields.pop("password", None)
        return fields


class LoginRequest(BaseModel):
    username: str
    password: str
