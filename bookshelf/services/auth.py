"""Credential service: registration and login against hashed passwords."""

import logging
from enum import Enum

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookshelf.config import get_settings
from bookshelf.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


class RejectionReason(str, Enum):
    """Why a credential operation was refused."""

    MISSING_FIELDS = "missing_fields"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"


class CredentialError(Exception):
    """Raised when registration or login is rejected."""

    def __init__(self, reason: RejectionReason):
        super().__init__(reason.value)
        self.reason = reason


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def register_user(
    db: Session, email: str | None, password: str | None, name: str | None = None
) -> User:
    """Create a new user after checking required fields and email uniqueness.

    The lookup and the insert are separate statements; two concurrent
    registrations can both pass the lookup, in which case the unique index on
    users.email rejects the second insert and it is reported as a duplicate.
    """
    if not email or not password:
        raise CredentialError(RejectionReason.MISSING_FIELDS)

    if get_user_by_email(db, email) is not None:
        raise CredentialError(RejectionReason.DUPLICATE_EMAIL)

    user = User(email=email, password_hash=get_password_hash(password), name=name or None)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Concurrent registration for {email} hit the unique index")
        raise CredentialError(RejectionReason.DUPLICATE_EMAIL) from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(db: Session, email: str | None, password: str | None) -> User:
    """Authenticate a user by email and password.

    An unknown email and a wrong password raise the same rejection.
    """
    if not email or not password:
        raise CredentialError(RejectionReason.MISSING_FIELDS)

    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise CredentialError(RejectionReason.INVALID_CREDENTIALS)
    return user
