# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from schemas.user import UserCreate
from services.auth import authenticate_user, register_user
from utils.errors import DuplicateUserError, InvalidCredentialsError, PersistenceError
from utils.sessions import (
    clear_session_cookie, create_session, destroy_session, purge_expired_sessions, set_session_cookie,
)

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)

LOGIN_PAGE = "/login.html"
SIGNUP_PAGE = "/signup.html"


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


# Register a new user from the signup form
@router.post("/register")
def register(
    username: str = Form(""),
    first_name: str = Form(""),
    last_name: str = Form(""),
    password: str = Form(""),
    role: str = Form("operator"),
    db: Session = Depends(get_db),
):
    try:
        payload = UserCreate(
            username=username,
            first_name=first_name or None,
            last_name=last_name or None,
            password=password,
            role=role,
        )
    except ValidationError:
        return _redirect(f"{SIGNUP_PAGE}?error=invalid")

    try:
        register_user(db, payload)
    except DuplicateUserError:
        return _redirect(f"{SIGNUP_PAGE}?error=duplicate")
    except PersistenceError:
        return PlainTextResponse("Error creating user.", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return _redirect(LOGIN_PAGE)


# Authenticate and open a server-side session
@router.post("/login")
def login(
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        user = authenticate_user(db, username=username, password=password)
    except InvalidCredentialsError:
        return _redirect(f"{LOGIN_PAGE}?error=invalid")

    try:
        purge_expired_sessions(db)
        token = create_session(db, user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Could not create session for user %s: %s", user.id, e)
        return _redirect(f"{LOGIN_PAGE}?error=invalid")

    logger.info("User %s logged in (role=%s)", user.username, user.role)
    response = _redirect("/dashboard")
    set_session_cookie(response, token)
    return response


# Destroy the session; the redirect happens even if that fails
@router.get("/logout")
def logout(request: Request, db: Session = Depends(get_db)):
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        try:
            destroy_session(db, token)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Failed to destroy session on logout: %s", e)

    response = _redirect(LOGIN_PAGE)
    clear_session_cookie(response)
    return response
