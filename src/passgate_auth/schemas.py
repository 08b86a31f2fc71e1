"""Data classes shared by the auth services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Decoded claims of an access token.

    Attributes
    ----------
    user_id
        The ``uid`` claim
    email
        The ``email`` claim
    app_id
        The ``app_id`` claim, the application the token was issued for
    exp
        The ``exp`` claim as an aware UTC datetime
    """

    user_id: int
    email: str
    app_id: int
    exp: datetime
