"""User registration and login endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookshelf.database import get_db
from bookshelf.schemas.auth import (
    LoginResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from bookshelf.services.auth import (
    CredentialError,
    RejectionReason,
    authenticate_user,
    register_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

REJECTIONS = {
    RejectionReason.MISSING_FIELDS: (
        status.HTTP_400_BAD_REQUEST,
        "Email and password are required",
    ),
    RejectionReason.DUPLICATE_EMAIL: (
        status.HTTP_409_CONFLICT,
        "Email already registered",
    ),
    RejectionReason.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Incorrect email or password",
    ),
}


def _rejected(error: CredentialError) -> HTTPException:
    status_code, message = REJECTIONS[error.reason]
    return HTTPException(status_code=status_code, detail=message)


@router.post("/register", response_model=RegisterResponse)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    try:
        user = register_user(db, user_data.email, user_data.password, user_data.name)
    except CredentialError as e:
        raise _rejected(e) from e
    except (SQLAlchemyError, ValueError) as e:
        db.rollback()
        logger.exception(f"Registration failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error during registration",
        ) from e

    return RegisterResponse(message="User registered successfully", id=user.id)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    try:
        user = authenticate_user(db, credentials.email, credentials.password)
    except CredentialError as e:
        if e.reason is RejectionReason.INVALID_CREDENTIALS:
            logger.info("Rejected login attempt")
        raise _rejected(e) from e
    except (SQLAlchemyError, ValueError) as e:
        db.rollback()
        logger.exception(f"Login failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error during login",
        ) from e

    # UserResponse carries no password field, so the hash never leaves here
    return LoginResponse(message="Login successful", user=UserResponse.model_validate(user))
