# services/auth.py
"""
User registration and credential checks.

Both functions take the request's SQLAlchemy session explicitly so the
routes (and tests) decide which store they run against.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.users import User
from schemas.user import UserCreate
from utils.errors import DuplicateUserError, InvalidCredentialsError, PersistenceError
from utils.hashing import get_password_hash, verify_password

logger = logging.getLogger(__name__)


def register_user(db: Session, payload: UserCreate) -> User:
    """
    Create a user with a hashed password.

    Raises DuplicateUserError when the username is taken (nothing is
    written) and PersistenceError when the store fails.
    """
    try:
        existing = db.query(User).filter(User.username == payload.username).first()
    except SQLAlchemyError as e:
        logger.exception("User lookup failed for registration: %s", e)
        raise PersistenceError("user lookup failed") from e

    if existing:
        logger.warning("Registration rejected, username taken: %s", payload.username)
        raise DuplicateUserError(payload.username)

    user = User(
        username=payload.username,
        first_name=payload.first_name,
        last_name=payload.last_name,
        password=get_password_hash(payload.password),
        role=payload.role,
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error creating user %s: %s", payload.username, e)
        raise PersistenceError("user insert failed") from e

    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
    return user


def authenticate_user(db: Session, *, username: str, password: str) -> User:
    """
    Return the user whose stored hash matches ``password``.

    Unknown usernames and wrong passwords raise the same
    InvalidCredentialsError so callers cannot tell them apart.
    """
    try:
        user = db.query(User).filter(User.username == username).first()
    except SQLAlchemyError as e:
        # Store failures look like a failed login to the caller
        logger.exception("User lookup failed during login: %s", e)
        raise InvalidCredentialsError() from e

    if not user or not verify_password(password, user.password):
        logger.warning("Failed login for username %s", username)
        raise InvalidCredentialsError()
    return user
