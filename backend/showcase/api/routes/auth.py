"""Auth Routes — login, logout, and the current session snapshot.

Invariants:
    - Responses never include the credential secret
    - logout is idempotent (204 even when nobody is logged in)
    - /me returns the snapshot taken at login, not live user data
"""

from fastapi import APIRouter, Depends, Response, status

from showcase.api.dependencies import require_user
from showcase.schemas.user import LoginRequest, SessionUser
from showcase.services.bootstrap import Showcase, get_showcase

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=SessionUser)
def login(body: LoginRequest, showcase: Showcase = Depends(get_showcase)):
    return showcase.sessions.login(body.username, body.password)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(showcase: Showcase = Depends(get_showcase)):
    showcase.sessions.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=SessionUser)
def me(user: SessionUser = Depends(require_user)):
    return user
