"""Passgate Auth - credential hashing and token issuing.

This package holds the parts of authentication that do not depend on
where users and applications are stored:
- Password hashing (bcrypt)
- Per-application access tokens (HS256 JWT)
- The authentication error taxonomy

Architecture:
    passgate_auth/
    ├── services/           # Pure logic (password hashing, tokens)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from passgate_auth import PasswordHashingService, TokenService
"""

from passgate_auth.exceptions import (
    AuthError,
    InternalError,
    InvalidApplicationError,
    InvalidCredentialsError,
    InvalidTokenError,
    UnknownUserError,
    UserAlreadyExistsError,
)
from passgate_auth.schemas import TokenClaims
from passgate_auth.services import PasswordHashingService, TokenService

__all__ = [
    # Services
    "PasswordHashingService",
    "TokenService",
    # Schemas
    "TokenClaims",
    # Exceptions
    "AuthError",
    "InternalError",
    "InvalidApplicationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UnknownUserError",
    "UserAlreadyExistsError",
]
