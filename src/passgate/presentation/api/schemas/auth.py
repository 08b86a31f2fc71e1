"""Authentication schemas for request/response models.

Input presence and format are validated here; the auth service receives
only requests that passed.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field

from passgate_auth import PasswordHashingService


def _check_password_bytes(value: str) -> str:
    limit = PasswordHashingService.MAX_PASSWORD_BYTES
    if len(value.encode("utf-8")) > limit:
        msg = f"Password cannot exceed {limit} bytes"
        raise ValueError(msg)
    return value


Password = Annotated[
    str,
    Field(min_length=1, description="Password"),
    AfterValidator(_check_password_bytes),
]


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: Password

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Passw0rd!",
            },
        },
    )


class RegisterResponse(BaseModel):
    user_id: int


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: Password
    app_id: int = Field(..., gt=0, description="Application requesting the token")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Passw0rd!",
                "app_id": 1,
            },
        },
    )


class LoginResponse(BaseModel):
    token: str


class IsAdminRequest(BaseModel):
    user_id: int = Field(..., gt=0)


class IsAdminResponse(BaseModel):
    is_admin: bool


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    detail: str
    code: str
