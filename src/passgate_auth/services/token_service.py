"""Access token service.

Issues compact HS256 JWTs scoped to a single application. Every
application signs with its own secret, so the key is passed per call
rather than held by the service.
"""

from datetime import datetime, timedelta, timezone

import jwt

from passgate_auth.exceptions import InvalidTokenError
from passgate_auth.schemas import TokenClaims


class TokenService:
    """Service for access token creation.

    The claim set is part of the public wire format: ``uid`` (int),
    ``email`` (str), ``app_id`` (int) and ``exp`` (int, epoch seconds).

    Examples
    --------
    >>> service = TokenService()
    >>> token = service.issue(1, "a@x.com", 1, "app-secret", timedelta(hours=1))
    >>> service.decode(token, "app-secret").user_id
    1
    """

    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("uid", "email", "app_id", "exp")

    def issue(
        self,
        user_id: int,
        email: str,
        app_id: int,
        app_secret: str,
        ttl: timedelta,
        now: datetime | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        app_id
            The application the token is issued for
        app_secret
            The application's signing secret
        ttl
            Lifetime of the token
        now
            Issue time; defaults to the current UTC time

        Returns
        -------
        The encoded JWT token string

        Raises
        ------
        ValueError
            If the application secret is empty
        """
        if not app_secret:
            msg = "Application secret cannot be empty"
            raise ValueError(msg)

        issued_at = now or datetime.now(tz=timezone.utc)
        payload = {
            "uid": user_id,
            "email": email,
            "app_id": app_id,
            "exp": int((issued_at + ttl).timestamp()),
        }

        return jwt.encode(payload, app_secret, algorithm=self.ALGORITHM)

    def decode(self, token: str, app_secret: str) -> TokenClaims:
        """Verify and decode a token issued for an application.

        Parameters
        ----------
        token
            The JWT token string to verify
        app_secret
            The secret of the application the token claims to belong to

        Returns
        -------
        TokenClaims containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                app_secret,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )

            return TokenClaims(
                user_id=int(payload["uid"]),
                email=str(payload["email"]),
                app_id=int(payload["app_id"]),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
