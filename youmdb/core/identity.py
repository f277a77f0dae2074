"""
Caller identity as handed over by the identity provider adapter.

The backend never sees credentials: it receives an opaque user id and a
flag telling whether the session is an anonymous/guest one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from youmdb.core.errors import PermissionDenied

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Identity:
    user_id: Optional[str] = None
    is_anonymous: bool = True

    @property
    def can_interact(self) -> bool:
        """Only signed-in, non-guest users may review, like or dislike."""
        return bool(self.user_id) and not self.is_anonymous


ANONYMOUS = Identity()


def require_interactive(identity: Optional[Identity], action: str) -> str:
    """Return the caller's user id, or raise if they may not write."""
    if identity is None or not identity.can_interact:
        raise PermissionDenied(f"Sign in with an account to {action}")
    return identity.user_id  # type: ignore[return-value]


def get_identity(
    x_user_id: Optional[str] = Header(default=None),
    x_user_anonymous: Optional[str] = Header(default=None),
) -> Identity:
    """FastAPI dependency: build the request identity from headers."""
    user_id = (x_user_id or "").strip() or None
    if user_id is None:
        return ANONYMOUS
    anonymous = (x_user_anonymous or "").strip().lower() in _TRUTHY
    return Identity(user_id=user_id, is_anonymous=anonymous)
