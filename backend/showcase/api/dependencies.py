"""Route Dependencies — session-derived identity guards.

Invariants:
    - require_user raises NotAuthenticatedError when nobody is logged in
    - require_admin additionally raises PermissionDeniedError for contributors
    - Identity comes from the session snapshot, never from request input
    - The snapshot is global to the process, not per client: every caller
      shares whoever logged in last
"""

from fastapi import Depends

from showcase.core.errors import NotAuthenticatedError, PermissionDeniedError
from showcase.schemas.user import SessionUser
from showcase.services.bootstrap import Showcase, get_showcase


def optional_user(showcase: Showcase = Depends(get_showcase)) -> SessionUser | None:
    return showcase.sessions.current()


def require_user(user: SessionUser | None = Depends(optional_user)) -> SessionUser:
    if user is None:
        raise NotAuthenticatedError()
    return user


def require_admin(user: SessionUser = Depends(require_user)) -> SessionUser:
    if not user.is_admin:
        raise PermissionDeniedError("manage users")
    return user
