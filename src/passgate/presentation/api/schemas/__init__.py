from passgate.presentation.api.schemas.auth import (
    ErrorResponse,
    IsAdminRequest,
    IsAdminResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

__all__ = [
    "ErrorResponse",
    "IsAdminRequest",
    "IsAdminResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
]
