"""Authentication services.

Provides password hashing and access token issuing.
"""

from passgate_auth.services.password_service import PasswordHashingService
from passgate_auth.services.token_service import TokenService

__all__ = [
    "PasswordHashingService",
    "TokenService",
]
