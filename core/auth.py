from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from fastapi import Cookie, Depends, Header
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from core.errors import Unauthenticated
from crud.session_crud import get_session_by_token
from crud.user_crud import get_user


@dataclass(frozen=True)
class Principal:
    user_id: int
    email: str


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def resolve_token(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> Optional[str]:
    return extract_bearer_token(authorization) or cookie_token


def get_current_principal(
    token: Optional[str] = Depends(resolve_token),
    db: Session = Depends(get_db),
) -> Optional[Principal]:
    """Resolve the request's credential to a Principal, or None if none was sent.

    A credential that is present but unknown, expired, or tied to a deleted
    user is rejected outright rather than treated as anonymous.
    """
    if not token:
        return None

    s = get_session_by_token(db, token)
    if not s:
        raise Unauthenticated("Invalid or expired token")

    exp = s.expires_at
    if exp.tzinfo is None:
        exp = exp.replace(tzinfo=timezone.utc)
    if exp < datetime.now(timezone.utc):
        raise Unauthenticated("Invalid or expired token")

    user = get_user(db, s.user_id)
    if not user:
        raise Unauthenticated("Invalid or expired token")
    return Principal(user_id=user.id, email=user.email)


def require_principal(principal: Optional[Principal]) -> Principal:
    if principal is None:
        raise Unauthenticated("Not authenticated")
    return principal
