"""User Routes — administrator-only user management.

Invariants:
    - Every endpoint requires an admin session
    - Responses are UserPublic (no password field)
    - Store errors (duplicate username, last admin, not found) surface via the global handler

Security:
    - The session is one process-wide value (api/dependencies.py): while an
      administrator is logged in, ANY client that can reach the server acts as
      that administrator here. Bind to localhost only and log out when done.
"""

from fastapi import APIRouter, Depends, Response, status

from showcase.api.dependencies import require_admin
from showcase.core.errors import ResourceNotFoundError
from showcase.schemas.user import UserCreate, UserPatch, UserPublic
from showcase.services.bootstrap import Showcase, get_showcase

router = APIRouter(
    prefix="/api/v1/users", tags=["users"], dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[UserPublic])
def list_users(showcase: Showcase = Depends(get_showcase)):
    return [u.to_public() for u in showcase.users.list()]


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, showcase: Showcase = Depends(get_showcase)):
    return showcase.users.create(body).to_public()


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: str, showcase: Showcase = Depends(get_showcase)):
    user = showcase.users.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return user.to_public()


@router.patch("/{user_id}", response_model=UserPublic)
def update_user(
    user_id: str, body: UserPatch, showcase: Showcase = Depends(get_showcase),
):
    return showcase.users.update(user_id, body).to_public()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, showcase: Showcase = Depends(get_showcase)):
    showcase.users.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
