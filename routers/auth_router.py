from datetime import datetime, timedelta, timezone
import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.auth import get_current_principal, require_principal, resolve_token
from core.config import settings
from core.database import get_db
from core.errors import Conflict, Unauthenticated, UserNotFound
from core.security import hash_password, new_session_token, verify_password
from crud.session_crud import create_session, delete_session_by_token
from crud.user_crud import create_user, get_user, get_user_by_email
from schemas.auth_schema import AuthTokenResponse, SigninRequest, SignupRequest
from schemas.base import MessageResponse
from schemas.session_schema import SessionCreate
from schemas.user_schema import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_session(db: Session, user, request: Request, response: Response) -> str:
    token = new_session_token()
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.SESSION_TTL_DAYS)
    ip = request.client.host if request.client else None
    ua = request.headers.get("user-agent")

    session = create_session(
        db,
        payload=SessionCreate(
            user_id=user.id,
            token=token,
            expires_at=expires_at,
            ip_address=ip,
            user_agent=ua,
        ),
    )
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=session.token,
        max_age=settings.SESSION_TTL_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=not settings.is_development,
    )
    return session.token


@router.post("/signup", response_model=AuthTokenResponse, status_code=201)
def signup(body: SignupRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    if get_user_by_email(db, body.email):
        raise Conflict("User with this email already exists")

    try:
        user = create_user(db, body.email, hash_password(body.password), name=body.name or None)
    except IntegrityError:
        # A concurrent signup claimed the email after the lookup above
        db.rollback()
        raise Conflict("User with this email already exists")
    logger.info("Registered user %s", user.id)
    token = _issue_session(db, user, request, response)
    return AuthTokenResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/signin", response_model=AuthTokenResponse)
def signin(body: SigninRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    user = get_user_by_email(db, body.email)
    if not user or not verify_password(body.password, user.password):
        raise Unauthenticated("Invalid email or password")

    token = _issue_session(db, user, request, response)
    return AuthTokenResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/signout", response_model=MessageResponse)
def signout(response: Response, token: str | None = Depends(resolve_token), db: Session = Depends(get_db)):
    if token:
        delete_session_by_token(db, token)
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME)
    return MessageResponse(message="Signed out successfully")


@router.get("/me", response_model=UserResponse)
def get_me(db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    principal = require_principal(principal)
    user = get_user(db, principal.user_id)
    if not user:
        raise UserNotFound()
    return user
