"""Pydantic schemas for API requests and responses."""

from bookshelf.schemas.auth import (
    LoginResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from bookshelf.schemas.book import (
    BookCreate,
    BookDelete,
    BookResponse,
    BookUpdate,
    MessageResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "BookCreate",
    "BookUpdate",
    "BookDelete",
    "BookResponse",
    "MessageResponse",
]
