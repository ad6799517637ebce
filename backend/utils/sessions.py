# utils/sessions.py
"""
Server-side sessions.

Session state (user id and role) lives in the ``sessions`` table so it
survives restarts. The browser only holds a signed cookie whose payload is
the opaque session id; a cookie that fails signature or expiry checks is
treated exactly like no cookie at all.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, Request
from jose import jwt, JWTError
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models.session import ServerSession
from models.users import User
from utils.errors import LoginRequired

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = timedelta(minutes=settings.SESSION_MAX_AGE_MINUTES)


def _sign(session_id: str, expires_at: datetime) -> str:
    return jwt.encode({"sid": session_id, "exp": expires_at}, settings.SESSION_SECRET, algorithm=settings.ALGORITHM)


def _unsign(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")


# Create a session row for the user and return the signed cookie value
def create_session(db: Session, user: User) -> str:
    now = datetime.utcnow()
    record = ServerSession(
        session_id=secrets.token_urlsafe(32),
        user_id=user.id,
        role=user.role,
        created_at=now,
        expires_at=now + SESSION_MAX_AGE,
    )
    db.add(record)
    db.commit()
    return _sign(record.session_id, record.expires_at)


# Resolve a cookie value to a live session, or None
def load_session(db: Session, token: str) -> Optional[ServerSession]:
    session_id = _unsign(token)
    if not session_id:
        return None

    record = db.query(ServerSession).filter(ServerSession.session_id == session_id).first()
    if record is None:
        return None

    if record.expires_at <= datetime.utcnow():
        db.delete(record)
        db.commit()
        return None
    return record


def destroy_session(db: Session, token: str) -> None:
    session_id = _unsign(token)
    if not session_id:
        return
    db.query(ServerSession).filter(ServerSession.session_id == session_id).delete()
    db.commit()


def purge_expired_sessions(db: Session) -> int:
    removed = db.query(ServerSession).filter(ServerSession.expires_at <= datetime.utcnow()).delete()
    db.commit()
    if removed:
        logger.info("Purged %d expired sessions", removed)
    return removed


def set_session_cookie(response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(SESSION_MAX_AGE.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def clear_session_cookie(response) -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)


# Dependency: the caller's active session, or None when unauthenticated
def get_current_session(request: Request, db: Session = Depends(get_db)) -> Optional[ServerSession]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return load_session(db, token)


# Dependency for protected routes; the app turns LoginRequired into a login redirect
def session_required(current: Optional[ServerSession] = Depends(get_current_session)) -> ServerSession:
    if current is None or current.user_id is None:
        raise LoginRequired()
    return current
