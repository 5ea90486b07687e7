"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict


class UserRegister(BaseModel):
    """User registration request."""

    email: str | None = None
    password: str | None = None
    name: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None


class RegisterResponse(BaseModel):
    """Registration acknowledgement with the new user's id."""

    message: str
    id: int


class LoginResponse(BaseModel):
    """Login acknowledgement with public user info."""

    message: str
    user: UserResponse
